"""Price a quote from a YAML or JSON file and print the result as JSON."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import ValidationError

from seedqc.schemas.pricing import (
    PricingDisplayRead,
    QuoteLineItemRead,
    QuotePricingInput,
)
from seedqc.services import pricing_service
from seedqc.services.pricing_config_service import (
    PricingConfigError,
    load_pricing_config,
)

LOGGER = logging.getLogger("quote_pricing")


def _read_document(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping of quote fields")
    return raw


def render(
    data: QuotePricingInput,
    *,
    config_path: Path | None = None,
    month: int | None = None,
    line_items: bool = False,
) -> str:
    """Price ``data`` and return the display view (or line items) as JSON."""
    config = load_pricing_config(config_path)
    result = pricing_service.calculate_quote_pricing(data, config, as_of_month=month)
    if line_items:
        items = [
            QuoteLineItemRead.model_validate(item).model_dump(mode="json", by_alias=True)
            for item in pricing_service.build_line_items(result)
        ]
        return json.dumps(items, indent=2)
    display = PricingDisplayRead.model_validate(pricing_service.to_ui_pricing(result))
    return display.model_dump_json(by_alias=True, indent=2)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Price a quote input file")
    parser.add_argument("input", type=Path, help="YAML or JSON quote input")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML or JSON pricing overrides.",
    )
    parser.add_argument(
        "--month",
        type=int,
        choices=range(1, 13),
        default=None,
        help="Calendar month used for setup fees (defaults to the current month).",
    )
    parser.add_argument(
        "--line-items",
        action="store_true",
        help="Print billable line items instead of the totals view.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        data = QuotePricingInput.model_validate(_read_document(args.input))
        output = render(
            data,
            config_path=args.config,
            month=args.month,
            line_items=args.line_items,
        )
    except (OSError, yaml.YAMLError, ValidationError, PricingConfigError, ValueError) as exc:
        LOGGER.error("Unable to price %s: %s", args.input, exc)
        return 2
    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
