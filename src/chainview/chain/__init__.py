from ._errors import ChainFormatError, ChainLoadError
from ._loader import load_chain
from ._models import Expiration, Greeks, Moneyness, OptionPair, OptionsChain, Quote

__all__ = [
    "ChainFormatError",
    "ChainLoadError",
    "Expiration",
    "Greeks",
    "Moneyness",
    "OptionPair",
    "OptionsChain",
    "Quote",
    "load_chain",
]
