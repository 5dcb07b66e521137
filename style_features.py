# style_features.py
"""
Stylometric feature extractor: lexical richness + character features.

For one text, returns an ordered {feature name: value} mapping with the
lexical features (CamelCase names) followed by the character features
(lowercase / `R:`-prefixed names).

Given a list of texts, returns a NumPy array of shape (n_samples, d) plus
the d feature names. Documents do not always share the same keys
(per-character features, empty groups), so rows are aligned by name and
missing features are filled with 0.
"""

import math
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from sklearn.feature_extraction import DictVectorizer
from tqdm import tqdm

from character_features import CharacterFeatures
from lexical_richness import LexicalRichness

PRECISION = 3


def extract_style_features(
    text,
    lexical: Optional[LexicalRichness] = None,
    character: Optional[CharacterFeatures] = None,
) -> Dict[str, float]:
    """Merge both engines' outputs for a single document."""
    lexical = lexical or LexicalRichness()
    character = character or CharacterFeatures()
    if isinstance(text, bytes):
        text = character.decode(text)

    out: Dict[str, float] = {}
    out.update(lexical.compute_all(text))
    out.update(character.compute_all(text))
    return out


def format_value(value, precision: int = PRECISION) -> str:
    """
    Floats and zeros get fixed `precision` decimals; integral counts
    (WordCount, VocabularySize) are printed as they are.
    """
    if isinstance(value, (float, np.floating)) or value == 0:
        value = float(value)
        if math.isinf(value) or math.isnan(value):
            return str(value)
        return f"{value:.{precision}f}"
    return str(value)


def format_feature_line(features: Dict[str, float], precision: int = PRECISION) -> str:
    return ",".join(format_value(v, precision) for v in features.values())


def compute_style_features(
    texts: Sequence,
    lexical: Optional[LexicalRichness] = None,
    character: Optional[CharacterFeatures] = None,
    dtype=np.float32,
    desc: Optional[str] = None,
) -> Tuple[np.ndarray, List[str]]:
    """
    Compute stylometric features for a list of texts.
    Pass `desc` to show a progress bar.

    Returns:
        feats: np.ndarray of shape (len(texts), d)
        names: the d feature names, in order of first appearance
    """
    lexical = lexical or LexicalRichness()
    character = character or CharacterFeatures()

    rows = []
    for text in (tqdm(texts, desc=desc) if desc else texts):
        if not isinstance(text, (str, bytes)):
            text = str(text)
        rows.append(extract_style_features(text, lexical, character))

    if not rows:
        return np.zeros((0, 0), dtype=dtype), []

    vec = DictVectorizer(dtype=dtype, sparse=False, sort=False)
    feats = vec.fit_transform(rows)
    return feats, list(vec.get_feature_names_out())


def style_feature_frame(
    texts: Sequence,
    lexical: Optional[LexicalRichness] = None,
    character: Optional[CharacterFeatures] = None,
) -> pd.DataFrame:
    """Same as compute_style_features, one column per feature."""
    feats, names = compute_style_features(texts, lexical, character, dtype=np.float64)
    return pd.DataFrame(feats, columns=names)
