# stylometrics.py
"""
stylometrics.py -f <document> [-c <class definitions>]

Extract lexical richness and character features from one document and
print them as a single comma-joined line.

Arguments:
    -f  text document (utf-8)
    -c  character class definition file; without it the per-character
        profile is used
"""

import argparse
import sys
from typing import List, Optional

from char_classes import ClassDefinitionError
from character_features import CharacterConfig, CharacterFeatures
from lexical_richness import LexicalRichness
from style_features import PRECISION, extract_style_features, format_feature_line
from text_source import ENCODING


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="stylometrics", description="Stylometric feature extraction")
    p.add_argument("-f", "--file", required=True, help="text document")
    p.add_argument("-c", "--classes", default=None, help="character class definition file")
    p.add_argument("--precision", type=int, default=PRECISION)
    p.add_argument("--header", action="store_true", help="print feature names first")
    return p


def run(doc_path: str, classes_path: Optional[str] = None, precision: int = PRECISION, header: bool = False) -> List[str]:
    """Return the output lines for one document."""
    if classes_path:
        character = CharacterFeatures(CharacterConfig.from_file(classes_path))
    else:
        character = CharacterFeatures()

    with open(doc_path, "r", encoding=ENCODING) as f:
        text = f.read()

    features = extract_style_features(text, LexicalRichness(), character)

    lines = []
    if header:
        lines.append(",".join(features))
    lines.append(format_feature_line(features, precision))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        lines = run(args.file, args.classes, args.precision, args.header)
    except (OSError, UnicodeDecodeError, ClassDefinitionError) as e:
        print(f"stylometrics: error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
