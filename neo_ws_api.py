#Fetches Near Earth Object data from NASA's Near Earth Object Web Service (NeoWs) API and turns it into Asteroid objects.

import json
import logging
import os
from collections.abc import Mapping
from datetime import date as _date
from pathlib import Path

import requests

from asteroid import Asteroid, MissingField
from physical_body import InvalidArgument

logger = logging.getLogger(__name__)

# -----------------------------
# CONFIGURATION
# -----------------------------
API_KEY = os.environ.get("NASA_API_KEY", "DEMO_KEY")
BASE_URL = "https://api.nasa.gov/neo/rest/v1/feed"
REQUEST_TIMEOUT = 10
USER_AGENT = "neo-bodies/1.0"


def fetch_neo_data(start_date, end_date, api_key=None, timeout=REQUEST_TIMEOUT):
    """Fetch NeoWs feed between start_date and end_date.

    start_date/end_date may be either ISO date strings (YYYY-MM-DD) or
    datetime.date objects. Returns the decoded JSON payload, or None when
    the API answers with a non-200 status. Connection errors propagate.
    """
    if isinstance(start_date, _date):
        start_date = start_date.isoformat()
    if isinstance(end_date, _date):
        end_date = end_date.isoformat()

    params = {
        "start_date": start_date,
        "end_date": end_date,
        "api_key": api_key or API_KEY,
    }
    response = requests.get(BASE_URL, params=params, timeout=timeout,
                            headers={"User-Agent": USER_AGENT})
    if response.status_code == 200:
        return response.json()
    logger.error("NeoWs error: %s - %s", response.status_code, response.text)
    return None


def iter_neo_records(feed):
    """Yield every object record of a feed payload, in ascending date order."""
    neos_by_date = (feed or {}).get("near_earth_objects", {})
    for day in sorted(neos_by_date):
        logger.debug("%s -> %d NEOs", day, len(neos_by_date[day]))
        yield from neos_by_date[day]


def load_asteroids(records, skip_invalid=True):
    """Build an Asteroid per record.

    With skip_invalid, records that are incomplete or physically invalid are
    logged and left out; otherwise the first failure propagates.
    """
    asteroids = []
    for record in records:
        try:
            asteroids.append(Asteroid.from_record(record))
        except (MissingField, InvalidArgument) as e:
            if not skip_invalid:
                raise
            neo_id = record.get("id", "?") if isinstance(record, Mapping) else "?"
            logger.warning("Skipping NEO %s: %s", neo_id, e)
    return asteroids


def load_feed_file(path):
    """Read records from a JSON file.

    Accepts a full feed payload, a list of object records, or one record.
    """
    with Path(path).open(encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, list):
        return data
    if "near_earth_objects" in data:
        return list(iter_neo_records(data))
    return [data]


if __name__ == "__main__":
    # When run directly, print the asteroids of the last five days
    from datetime import timedelta

    from body_report import format_asteroid_table

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(module)s - %(message)s')
    today_date = _date.today()
    start_dt = today_date - timedelta(days=4)
    data = fetch_neo_data(start_dt, today_date)
    if not data:
        print("No NEO data returned from API.")
    else:
        print(format_asteroid_table(load_asteroids(iter_neo_records(data))))
