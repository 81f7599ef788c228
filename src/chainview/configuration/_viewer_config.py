import json
from pathlib import Path
from typing import Any, Dict, List

import jmespath  # http://jmespath.org/tutorial.html

from chainview import labels
from chainview.constants import DEFAULT_CONFIG_FILE, PAGE_SIZE, VISIBLE_WINDOW
from chainview.logger import LOGGER
from chainview.navigation import NavigatorName

log = LOGGER.setup_logger('Configuration')


class ViewerConfig:
    """
    Optional viewer settings read from a JSON file.

    Values are looked up with jmespath search patterns. A missing or broken
    file is not fatal: every getter falls back to its default.

    Example file:
        {
            "navigation": {"layout": "tabs", "page_size": 5, "visible_window": 10},
            "display": {"show_greeks": false},
            "keys": {"quit": ["x"], "next": ["n"], "previous": ["p"]}
        }
    """

    NAVIGATION_LAYOUT = 'navigation.layout'
    NAVIGATION_PAGE_SIZE = 'navigation.page_size'
    NAVIGATION_VISIBLE_WINDOW = 'navigation.visible_window'
    DISPLAY_SHOW_GREEKS = 'display.show_greeks'
    KEYS = 'keys'

    def __init__(self, path=None):
        self.path = Path(path or DEFAULT_CONFIG_FILE).expanduser()
        self.values: Dict[str, Any] = {}
        self.load_config()

    def load_config(self) -> None:
        if not self.path.is_file():
            log.info(labels.LOG_CONFIG_MISSING.format(self.path))
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as json_file:
                values = json.load(json_file)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            log.warning(labels.LOG_CONFIG_INVALID.format(self.path, e))
            return

        if not isinstance(values, dict):
            log.warning(labels.LOG_CONFIG_INVALID.format(self.path, 'top level must be an object'))
            return

        self.values = values
        log.info(labels.LOG_CONFIG_LOADED.format(self.path))

    def get(self, search_pattern: str, default: Any = None) -> Any:
        value = jmespath.search(search_pattern, self.values)
        log.debug(search_pattern + ': ' + str(value))
        return default if value is None else value

    def _get_int(self, search_pattern: str, default: int) -> int:
        value = self.get(search_pattern, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            log.warning(f"{search_pattern} must be a positive integer, using {default}")
            return default
        return value

    @property
    def layout(self) -> NavigatorName:
        value = self.get(self.NAVIGATION_LAYOUT, NavigatorName.SCROLL.value)
        try:
            return NavigatorName(value)
        except ValueError:
            log.warning(f"Unknown layout {value!r}, using {NavigatorName.SCROLL.value}")
            return NavigatorName.SCROLL

    @property
    def page_size(self) -> int:
        return self._get_int(self.NAVIGATION_PAGE_SIZE, PAGE_SIZE)

    @property
    def visible_window(self) -> int:
        return self._get_int(self.NAVIGATION_VISIBLE_WINDOW, VISIBLE_WINDOW)

    @property
    def show_greeks(self) -> bool:
        value = self.get(self.DISPLAY_SHOW_GREEKS, True)
        if not isinstance(value, bool):
            log.warning(f"{self.DISPLAY_SHOW_GREEKS} must be true or false, using true")
            return True
        return value

    @property
    def extra_keys(self) -> Dict[str, List[str]]:
        keys = self.get(self.KEYS, {})
        if not isinstance(keys, dict):
            return {}
        return {action: list(values) for action, values in keys.items() if isinstance(values, list)}
