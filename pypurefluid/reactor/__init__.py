from .reactor import PureFluidReactor
