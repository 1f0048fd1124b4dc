import logging
import requests

from .. import config

logger = logging.getLogger(__name__)

FRANKFURTER = "https://api.frankfurter.app/latest"


def convert(amount: float, from_ccy: str, to_ccy: str):
    """Live conversion. Returns (converted_amount, rate)."""
    if from_ccy.upper() == to_ccy.upper():
        return amount, 1.0
    r = requests.get(
        FRANKFURTER,
        params={"amount": amount, "from": from_ccy.upper(), "to": to_ccy.upper()},
        timeout=config.HTTP_TIMEOUT,
    )
    r.raise_for_status()
    js = r.json()
    converted = js["rates"][to_ccy.upper()]
    return converted, converted / amount if amount else 0.0


def jpy_per_usd(live: bool = False) -> float:
    # static rate unless asked; a failed lookup falls back to it
    if not live:
        return config.EXCHANGE_RATE_JPY_PER_USD
    try:
        _, rate = convert(1.0, "USD", "JPY")
        if rate > 0:
            return rate
        logger.warning("live FX returned non-positive rate %r; using static", rate)
    except (requests.RequestException, KeyError, ValueError) as e:
        logger.warning("live FX lookup failed (%s); using static rate", e)
    return config.EXCHANGE_RATE_JPY_PER_USD
