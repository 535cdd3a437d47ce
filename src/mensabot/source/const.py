"""Constants for the menu API."""

PLANS_ENDPOINT = "/plans"
PLAN_ENDPOINT = "/plans/{day}"

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "mensabot",
}
