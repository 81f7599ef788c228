### Data File ###
DEFAULT_CHAIN_FILE = 'sample-options-chain.json'
DEFAULT_CONFIG_FILE = '~/.chainview.json'

### Navigation ###
# Rows assumed visible when reconciling the scroll offset. Independent of the
# real terminal height used by the allocator.
VISIBLE_WINDOW = 10
# Cursor step for page up / page down
PAGE_SIZE = 5

### Layout ###
# Border (2) + header row (1) of a collapsed expiration block
COLLAPSED_HEIGHT = 3
# Table header + padding added on top of one row per strike when expanded
EXPANDED_EXTRA_ROWS = 2
TITLE_HEIGHT = 3
OUTER_MARGIN = 1
TAB_STRIP_HEIGHT = 1

# Minimum terminal size
MIN_TERMINAL_HEIGHT = 8
MIN_TERMINAL_WIDTH = 40

### Option Table ###
SYMBOL_COLUMN_WIDTH = 10
VALUE_COLUMN_WIDTH = 8
STRIKE_COLUMN_WIDTH = 10
COLUMN_SPACING = 1

PRICE_FORMAT = '{:.2f}'
GREEK_FORMAT = '{:.4f}'


__all__ = [
    'DEFAULT_CHAIN_FILE',
    'DEFAULT_CONFIG_FILE',
    'VISIBLE_WINDOW',
    'PAGE_SIZE',
    'COLLAPSED_HEIGHT',
    'EXPANDED_EXTRA_ROWS',
    'TITLE_HEIGHT',
    'OUTER_MARGIN',
    'TAB_STRIP_HEIGHT',
    'MIN_TERMINAL_HEIGHT',
    'MIN_TERMINAL_WIDTH',
    'SYMBOL_COLUMN_WIDTH',
    'VALUE_COLUMN_WIDTH',
    'STRIKE_COLUMN_WIDTH',
    'COLUMN_SPACING',
    'PRICE_FORMAT',
    'GREEK_FORMAT',
]
