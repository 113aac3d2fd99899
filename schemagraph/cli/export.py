"""Export the JSON Schema document of an entity graph."""

from __future__ import annotations

import argparse
import importlib
import logging
from pathlib import Path

from schemagraph.core.reflect import PydanticModelProvider
from schemagraph.core.registry import load_registry
from schemagraph.schema.assembler import DocumentAssembler, EncoderOptions


def _import_model(reference: str):
    module_name, _, attr = reference.partition(":")
    if not module_name or not attr:
        raise ValueError(f"Model reference must look like 'package.module:Model', got {reference!r}")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ValueError(f"Module {module_name!r} has no attribute {attr!r}") from exc


def render_schema(
    source: str,
    *,
    root: str | None = None,
    options: EncoderOptions | None = None,
    qualified_titles: bool = True,
) -> str:
    """Return the encoded document for a descriptor file or model reference."""

    if ":" in source and not Path(source).exists():
        model = _import_model(source)
        provider = PydanticModelProvider(qualified_titles=qualified_titles)
        return DocumentAssembler(provider, options=options).assemble(model)

    if not root:
        raise ValueError("--root is required when exporting from a descriptor file")
    registry = load_registry(source)
    return DocumentAssembler(registry, options=options).assemble(root)


def main(argv: list[str] | None = None) -> int:
    """Run the schema export CLI."""

    parser = argparse.ArgumentParser(description="Export a JSON Schema for an entity graph.")
    parser.add_argument(
        "source",
        help="Entity descriptor JSON file, or 'package.module:Model' for a pydantic model.",
    )
    parser.add_argument("--root", help="Root entity title (descriptor files only).")
    parser.add_argument("--out", help="Output JSON path. Prints to stdout if omitted.")
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indent; defaults to $SCHEMAGRAPH_JSON_INDENT or compact output.",
    )
    parser.add_argument(
        "--short-titles",
        action="store_true",
        help="Use bare class names instead of module-qualified titles for models.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = EncoderOptions(indent=args.indent) if args.indent is not None else EncoderOptions.from_env()
        text = render_schema(
            args.source,
            root=args.root,
            options=options,
            qualified_titles=not args.short_titles,
        )
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text + "\n", encoding="utf-8")
        print(f"OK: wrote {out_path}")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
