from .substance import Substance
