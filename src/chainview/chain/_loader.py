import json
from pathlib import Path

from chainview import labels
from chainview.chain._errors import ChainLoadError
from chainview.chain._models import OptionsChain
from chainview.logger import LOGGER

log = LOGGER.setup_logger('ChainLoader')


def load_chain(path) -> OptionsChain:
    """
    Read an options chain snapshot from a JSON file.

    Args:
        path (str | Path): Location of the JSON document.

    Returns:
        OptionsChain: The fully validated, immutable chain.

    Raises:
        ChainLoadError: The file is missing, unreadable or not JSON.
        ChainFormatError: The document does not match the chain schema.
    """
    path = Path(path)
    log.info(labels.LOG_LOADING_CHAIN.format(path))

    if not path.is_file():
        raise ChainLoadError(labels.ERR_FILE_NOT_FOUND.format(path))

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ChainLoadError(labels.ERR_FILE_UNREADABLE.format(path, e)) from e
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, integers over the digit limit, nesting too deep
        raise ChainLoadError(labels.ERR_INVALID_JSON.format(path, e)) from e

    chain = OptionsChain.from_dict(data)
    log.info(labels.LOG_CHAIN_LOADED.format(chain.symbol, chain.expiration_count))
    return chain
