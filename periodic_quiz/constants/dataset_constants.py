"""Where the element dataset comes from and how to reach related pages."""

DATA_URL: str = (
    "https://raw.githubusercontent.com/Bowserinator/Periodic-Table-JSON/master/PeriodicTableJSON.json"
)
DATASET_TIMEOUT_SECONDS: float = 15.0
READ_MORE_URL_TEMPLATE: str = "https://en.wikipedia.org/wiki/{name}"
IMAGE_URL_TEMPLATE: str = "https://images-of-elements.com/{symbol}.png"
# Optional local copy under periodic_quiz/data, read when the download fails.
LOCAL_DATASET_FILE: str = "PeriodicTableJSON.json"
