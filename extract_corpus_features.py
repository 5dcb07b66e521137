# extract_corpus_features.py
"""
Compute stylometric features for every document of a JSONL split
and save them as .npy + .csv files.

Inputs:
    <split>.jsonl              one JSON object per line with a "text" field
    optional character class definition file (-c)
Outputs:
    <out_dir>/<split>_style.npy   (N, d) float32 matrix
    <out_dir>/<split>_style.csv   same values with feature names (+ ids)
"""

import argparse
import os
import sys
from typing import List, Optional

import numpy as np
import pandas as pd

from character_features import CharacterConfig, CharacterFeatures
from dataset_loader import TEXT_COL, load_split
from lexical_richness import LexicalRichness
from style_features import compute_style_features

# ---- Config ----
SPLITS = ["train.jsonl", "val.jsonl"]
OUT_DIR = "style_features_out"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Extract stylometric features from JSONL splits")
    p.add_argument("splits", nargs="*", default=SPLITS, help="JSONL files with a 'text' field")
    p.add_argument("-c", "--classes", default=None, help="character class definition file")
    p.add_argument("-o", "--out-dir", default=OUT_DIR)
    p.add_argument("--text-col", default=TEXT_COL)
    return p


def extract_split(path: str, out_dir: str, character: CharacterFeatures, text_col: str = TEXT_COL) -> str:
    texts, ids = load_split(path, text_col=text_col)

    split = os.path.splitext(os.path.basename(path))[0]
    feats, names = compute_style_features(
        texts,
        LexicalRichness(),
        character,
        desc=f"Computing style features for {split}",
    )
    print(f"{split} style features shape:", feats.shape)

    npy_path = os.path.join(out_dir, f"{split}_style.npy")
    csv_path = os.path.join(out_dir, f"{split}_style.csv")
    np.save(npy_path, feats)

    df = pd.DataFrame(feats, columns=names)
    if ids is not None:
        df.insert(0, "id", ids)
    df.to_csv(csv_path, index=False, encoding="utf-8")

    print(f"Saved style features to {npy_path} and {csv_path}")
    return npy_path


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.classes:
        print(f"Loading character classes from {args.classes}...")
        character = CharacterFeatures(CharacterConfig.from_file(args.classes))
    else:
        character = CharacterFeatures()

    os.makedirs(args.out_dir, exist_ok=True)
    for path in args.splits:
        extract_split(path, args.out_dir, character, args.text_col)
    return 0


if __name__ == "__main__":
    sys.exit(main())
