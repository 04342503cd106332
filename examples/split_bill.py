from __future__ import annotations

import logging

from majik_money import Money, dumps, loads


logger = logging.getLogger(__name__)


def run() -> None:
    # Restaurant bill in pesos, 12% VAT on top
    subtotal = Money.from_major("2450.75", "PHP")
    total = subtotal.add_percentage("0.12")
    logger.info(f"Bill total with VAT: {total.format()}")

    # Split between three diners by what they ordered (2:1:1); shares always sum to the total
    shares = total.allocate([2, 1, 1])
    for diner, share in zip(["Ana", "Ben", "Carla"], shares):
        logger.info(f"{diner} pays {share.format()}")
    assert Money.sum(shares) == total

    # Ben settles in USD at a quoted USDPHP rate of 56.25
    ben_usd = shares[1].convert_from_quoted("56.25", "USD")
    logger.info(f"Ben pays {ben_usd.format('en_US')} ({ben_usd})")

    # Statistics over the shares
    logger.info(f"Average share: {Money.average(shares)}, median: {Money.median(shares)}, largest: {Money.max(shares)}")

    # Persist and restore the whole split
    text = dumps({"total": total, "shares": shares}, indent=2)
    logger.info(f"Serialized split:\n{text}")
    assert loads(text) == {"total": total, "shares": shares}


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
