"""Application constants.

Client-facing labels for the enumerated post fields and the fixed messages
returned by the API.
"""

from posts_api.models.enums import ErrorKind, NewsCategory

# ---------------------------------------------------------------------------
# newsCategory labels
# ---------------------------------------------------------------------------
NEWS_CATEGORY_LABELS: dict[NewsCategory, str] = {
    NewsCategory.formula_1: "Formula 1",
    NewsCategory.formula_e: "Formula E",
    NewsCategory.supercars: "Supercars",
    NewsCategory.wec: "WEC",
    NewsCategory.nascar: "NASCAR",
    NewsCategory.indycar: "Indycar",
    NewsCategory.esports: "Esports",
    NewsCategory.open_wheel: "Open wheel",
    NewsCategory.enduro: "Enduro",
    NewsCategory.stock: "Stock",
    NewsCategory.drag: "Drag",
    NewsCategory.rally: "Rally",
    NewsCategory.off_road: "Off-road",
    NewsCategory.touring: "Touring",
    NewsCategory.moto_gp: "Moto GP",
    NewsCategory.motocross: "Motocross",
    NewsCategory.other: "Other",
}


def _describe(labels: dict[NewsCategory, str]) -> str:
    return ", ".join(f"{member.value} for {label}" for member, label in labels.items())


# ---------------------------------------------------------------------------
# Validation messages
# ---------------------------------------------------------------------------
APP_CATEGORY_ERROR = "appCategory must be either 1 or 2, 1 for news and 2 for events"
NEWS_CATEGORY_ERROR = (
    f"newsCategory must be between {min(NewsCategory).value} and "
    f"{max(NewsCategory).value}, {_describe(NEWS_CATEGORY_LABELS)}"
)
REGION_ERROR = "region must be either 1 or 2, 1 for world and 2 for nz"
BODY_ERROR = "Request body must be a JSON object"
LIMIT_ERROR = "number must be a positive integer"

# ---------------------------------------------------------------------------
# Response messages
# ---------------------------------------------------------------------------
POST_NOT_FOUND = "Post not found"
POST_DELETED = "Post deleted successfully"

# Client-facing status and message per store failure kind
STORE_ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.conditional_check_failed: 400,
    ErrorKind.access_denied: 403,
    ErrorKind.throttled: 429,
    ErrorKind.store_failure: 502,
    ErrorKind.store_unavailable: 503,
}

STORE_ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.conditional_check_failed: "The conditional request failed",
    ErrorKind.access_denied: "The datastore denied access to the posts table",
    ErrorKind.throttled: "Too many requests to the datastore, try again later",
    ErrorKind.store_failure: "The datastore could not complete the request",
    ErrorKind.store_unavailable: "The datastore is unavailable",
}
