"""Default settings shared by the config schema and the layout engine."""

# Total width of the rendered document. Narrower terminals will wrap lines,
# so keep it as small as the view allows.
DEFAULT_VIEWPORT_WIDTH = 90
DEFAULT_GRAPH_HEIGHT = 10

DEFAULT_SPOTS_PATH = "data/spots.json"

MSW_BASE_URL = "https://magicseaweed.com/api"
MSW_API_KEY_ENV = "MSW_API_KEY"
MSW_SITE_MAP_URL = "https://magicseaweed.com/site-map.php"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
