"""
User-facing strings for the chain viewer.

Centralizing them here keeps the renderer and the CLI free of literals.
"""

# Title bar
TITLE_FORMAT = "{} - ${:.2f} - {} - {}"
HELP_SCROLL = "Use ↑/↓/PgUp/PgDn to navigate, 'e' to expand/collapse, 'g' to toggle Greeks, 'q' to quit"
HELP_TABS = "Use ←/→ or Tab to switch expiration, 'e' to expand/collapse, 'g' to toggle Greeks, 'q' to quit"

# Expiration blocks
EXPANDED_PREFIX = "[-] "
COLLAPSED_PREFIX = "[+] "
SCROLL_INDICATOR = "Scroll: {}/{}"
NO_EXPIRATIONS = "No expirations in this chain"

# Option table headers
HEADER_CALL_SYMBOL = "Call Sym"
HEADER_PUT_SYMBOL = "Put Sym"
HEADER_BID = "Bid"
HEADER_ASK = "Ask"
HEADER_BID_SIZE = "Bid Size"
HEADER_ASK_SIZE = "Ask Size"
HEADER_VOLUME = "Volume"
HEADER_DELTA = "Delta"
HEADER_GAMMA = "Gamma"
HEADER_VEGA = "Vega"
HEADER_STRIKE = "Strike"

# Terminal size
MSG_TERMINAL_TOO_SMALL = "Terminal too small!"
MSG_RESIZE_CONTINUE = "Please resize to continue"

# CLI
CLI_DESCRIPTION = "Options chain viewer"
CLI_FILENAME_HELP = "Path to the options chain JSON file (or a directory to pick one from)"
CLI_LAYOUT_HELP = "Navigation layout: scrolling list or one tab per expiration"
CLI_CONFIG_HELP = "Path to the viewer configuration file"
CLI_DEBUG_HELP = "Log navigation events at DEBUG level (writes logs/chainview.log unless --log-file is given)"
CLI_LOG_FILE_HELP = "Write a log file to this path; nothing is written by default"
PICK_TITLE = "Select an options chain file from {}"

# Log / error messages
LOG_LOADING_CHAIN = "Loading options chain from {}"
LOG_CHAIN_LOADED = "Loaded {} with {} expirations"
LOG_CONFIG_MISSING = "No configuration file at {}, using defaults"
LOG_CONFIG_INVALID = "Configuration file {} is not valid JSON, using defaults: {}"
LOG_CONFIG_LOADED = "Loaded configuration from {}"
LOG_VIEWER_STARTING = "Starting viewer with {} layout"
LOG_VIEWER_STOPPED = "Viewer stopped"
MSG_ERROR_PREFIX = "[ERROR] {}"
ERR_FILE_NOT_FOUND = "Options chain file not found: {}"
ERR_FILE_UNREADABLE = "Could not read options chain file {}: {}"
ERR_INVALID_JSON = "Options chain file {} is not valid JSON: {}"
ERR_NO_JSON_FILES = "No JSON files found in {}"
