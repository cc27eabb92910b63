from .phase import PureFluid
