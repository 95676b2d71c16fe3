"""Configuration constants for the Netgear switch console client."""

DEFAULT_TIMEOUT = 10   # seconds per HTTP request
USER_AGENT      = "netgear-console/1.0"
BS4_PARSER      = "lxml"

# Durable token files live under <root>/.config/<TOKEN_PRODUCT_DIR>/
TOKEN_CONFIG_DIR  = ".config"
TOKEN_PRODUCT_DIR = "netgear-console"
TOKEN_FILE_PREFIX = "token-"
TOKEN_DIR_ENV     = "NETGEAR_TOKEN_DIR"

# Password collaborator environment variables
PASSWORD_ENV_PREFIX = "NETGEAR_PASSWORD_"
MODEL_ENV_PREFIX    = "NETGEAR_MODEL_"
SWITCHES_ENV        = "NETGEAR_SWITCHES"

# Unauthenticated detection pages
ROOT_PAGE  = "/"
LOGIN_CGI  = "/login.cgi"

# GS30x ("session"): seed and credential both go through /login.cgi
SESSION_LOGIN_PAGE   = LOGIN_CGI
SESSION_LOGIN_POST   = LOGIN_CGI
SESSION_PASSWORD_FIELD = "password"
SESSION_COOKIE_NAME  = "SID"

# GS316 ("gambit"): seed from /wmi/login, credential posted to /redirect.html
GAMBIT_LOGIN_PAGE     = "/wmi/login"
GAMBIT_LOGIN_POST     = "/redirect.html"
GAMBIT_PASSWORD_FIELD = "LoginPassword"
GAMBIT_PARAM          = "Gambit"

# id of the <input> element carrying the per-session seed
SEED_ELEMENT_ID = "rand"

# Placeholder returned for an unauthenticated GS30x redirect page
GENERIC_30X_MODEL = "GS30xEPx"

# Longer names first: "GS316EPP" must be tested before "GS316EP"
MODEL_SEARCH_ORDER = (
    "GS316EPP",
    "GS316EP",
    "GS305EPP",
    "GS305EP",
    "GS308EPP",
    "GS308EP",
)

# Redirect-to-login markers served by GS30x root pages
REDIRECT_MARKERS = ("Redirect to Login", "redirect")

# A data page that references one of these paths is the login page in disguise
LOGIN_PAGE_MARKERS = ("/login.cgi", "/wmi/login", "/redirect.html")
MIN_DATA_PAGE_LENGTH = 10

# Data endpoints per authentication family
ENDPOINTS = {
    "session": {
        "poe_status":   "/getPoePortStatus.cgi",
        "poe_settings": "/PoEPortConfig.cgi",
        "poe_update":   "/PoEPortConfig.cgi",
        "port_settings": "/PortStatistics.cgi",
        "port_update":  "/PortConfig.cgi",
    },
    "gambit": {
        "poe_status":   "/iss/specific/poePortStatus.html",
        "poe_settings": "/iss/specific/poePortConf.html",
        "poe_update":   "/iss/specific/poePortConf.html",
        "port_settings": "/iss/specific/interface.html",
        "port_update":  "/iss/specific/interface.html",
    },
}
