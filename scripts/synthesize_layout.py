#!/usr/bin/env python3
"""
Offline layout tools.

Subcommands:
    layout   Synthesize per-character geometry for recognized units (JSON in,
             JSON out)
    markers  Validate a reference marker layout and print the scores

Usage:
    python scripts/synthesize_layout.py layout --input units.json --output out.json
    python scripts/synthesize_layout.py markers --input markers.json
"""

import argparse
import logging
import sys
from pathlib import Path

from src.alignment.config_loader import load_config as load_alignment_config
from src.alignment.processor import MarkerLayoutValidator
from src.ocr.document import build_perspective_content
from src.text_layout.config_loader import get_default_config
from src.text_layout.config_loader import load_config as load_layout_config
from src.text_layout.synthesizer import CharacterLayoutSynthesizer
from src.text_layout.types import RecognizedTextUnit, ReferenceMarker
from src.utils.io import load_json, save_json
from src.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _items(data, key: str) -> list:
    """Accept either a bare list or an object wrapping it under ``key``."""
    return data[key] if isinstance(data, dict) else data


def run_layout(args: argparse.Namespace) -> int:
    config = load_layout_config(Path(args.config)) if args.config else get_default_config()
    synthesizer = CharacterLayoutSynthesizer(config=config)

    units = [RecognizedTextUnit.from_dict(item) for item in _items(load_json(Path(args.input)), "units")]
    for unit in units:
        synthesizer.apply(unit)

    content = build_perspective_content(units)
    save_json(content.to_dict(), Path(args.output))
    logger.info(f"Wrote {len(units)} units to {args.output}")
    return 0


def run_markers(args: argparse.Namespace) -> int:
    config = load_alignment_config(Path(args.config)) if args.config else load_alignment_config()
    validator = MarkerLayoutValidator(config=config)

    markers = [ReferenceMarker.from_dict(item) for item in _items(load_json(Path(args.input)), "markers")]
    result = validator.validate(markers)

    print(f"Decision: {result.decision.value}")
    print(f"Markers: {result.marker_count}")
    if result.shape_score is not None:
        print(f"Shape similarity: {result.shape_score:.4f}")
        print(f"Offset score: {result.offset_score:.4f}")
    print(result.get_error_message())
    return 0 if result.is_pass() else 1


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Character layout and marker validation tools",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('--log-level', type=str, default='INFO', help='Logging level')
    subparsers = parser.add_subparsers(dest='command', required=True)

    layout = subparsers.add_parser('layout', help='Synthesize character geometry')
    layout.add_argument('--input', type=str, required=True, help='Units JSON file')
    layout.add_argument('--output', type=str, required=True, help='Output JSON file')
    layout.add_argument('--config', type=str, default=None, help='Layout config YAML')
    layout.set_defaults(func=run_layout)

    markers = subparsers.add_parser('markers', help='Validate a marker layout')
    markers.add_argument('--input', type=str, required=True, help='Markers JSON file')
    markers.add_argument('--config', type=str, default=None, help='Alignment config YAML')
    markers.set_defaults(func=run_markers)

    args = parser.parse_args()
    setup_logging(args.log_level.upper())
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
