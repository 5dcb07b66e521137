# lexical_richness.py
"""
Measures of lexical richness computed from a whitespace-tokenized document.

Notation:
    N      -- token count (text length in words)
    V      -- type count (vocabulary size)
    V(i,N) -- number of types occurring exactly i times (frequency spectrum)
    L(i,N) -- number of word occurrences of length i

Groups returned by LexicalRichness.compute_all, in order:
    A. type/token:  WordCount, VocabularySize, TypeTokenRatio,
                    MeanWordFrequency, GuiraudR, HerdanC, RupetK, MaasA,
                    DugastU, LukjanenkovNeistoj, BrunetW
    B. length:      AverageWordLength
    C. length ratio ShortWordRatio, LengthRatio-<L>
    D. spectrum:    SichelS, MicheaM, HonoreH, Entropy, YuleK, SimpsonD,
                    HerdanV
    E. freq. ratio: HapaxLegomenaRatio, HapaxDislegomenaRatio

A group with no tokens to work on is returned as an empty dict. All
logarithms are base 10. Every guard below resolves a zero denominator
(or a log domain error) to 0; they are part of the feature definitions.
"""

import math
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from text_source import InvalidInput, is_alphabetic, tokenize

# ---- Config ----
SHORT_WORD_MIN = 1       # ShortWordRatio lower bound (inclusive)
SHORT_WORD_MAX = 3       # ShortWordRatio upper bound (inclusive)
LENGTH_TABLE_MIN = 1     # length-distribution table range;
LENGTH_TABLE_MAX = 30    # longer words are folded into the last bucket
BRUNET_A = 0.172
HONORE_A = 1
HONORE_B = 100
YULE_SCALE = 1


@dataclass(frozen=True)
class LexicalConfig:
    short_min: int = SHORT_WORD_MIN
    short_max: int = SHORT_WORD_MAX
    length_min: int = LENGTH_TABLE_MIN
    length_max: int = LENGTH_TABLE_MAX
    brunet_a: float = BRUNET_A
    honore_a: float = HONORE_A
    honore_b: float = HONORE_B
    yule_scale: float = YULE_SCALE
    alpha_only: bool = False  # keep only alphabetic tokens before counting


# ---- Frequency tables ----
def comp_type_frequencies(words: List[str]) -> Counter:
    """Type-frequency table: token -> occurrence count."""
    return Counter(words)


def comp_type_freq_frequencies(words: List[str]) -> Dict[int, int]:
    """
    Frequency spectrum ("frequency of frequencies"): i -> V(i,N).
    Sparse, keys ascending.
    """
    spectrum = Counter(comp_type_frequencies(words).values())
    return {i: spectrum[i] for i in sorted(spectrum)}


def comp_length_frequencies(
    words: List[str],
    min_len: int = LENGTH_TABLE_MIN,
    max_len: int = LENGTH_TABLE_MAX,
) -> Dict[int, int]:
    """
    Length-distribution table over [min_len, max_len]: L -> occurrences.
    Every bucket is present; lengths outside the range go to the nearest end.
    """
    table = {length: 0 for length in range(min_len, max_len + 1)}
    for word, cnt in comp_type_frequencies(words).items():
        length = min(max(len(word), min_len), max_len)
        table[length] += cnt
    return table


def comp_ratios(table: Mapping[int, int], num: Optional[float] = None) -> Dict[int, float]:
    """Divide every entry by `num` (the table sum if not given); all 0 if it is 0."""
    if num is None:
        num = sum(table.values())
    if num == 0:
        return {k: 0.0 for k in table}
    return {k: v / num for k, v in table.items()}


def comp_length_ratios(N: int, len_freq: Mapping[int, int]) -> Dict[int, float]:
    return comp_ratios(len_freq, N)


def comp_frequency_ratios(N: int, freq_freq: Mapping[int, int]) -> Dict[int, float]:
    return comp_ratios(freq_freq, N)


# ---- Basic counts ----
def comp_word_count(words: List[str]) -> int:
    return len(words)


def comp_character_count(words: List[str]) -> int:
    """Characters in all token occurrences (whitespace excluded)."""
    return sum(len(w) for w in words)


def comp_vocabulary_size(words: List[str]) -> int:
    return len(comp_type_frequencies(words))


def comp_average_word_length(words: List[str]) -> float:
    n = comp_word_count(words)
    return comp_character_count(words) / n if n else 0.0


# ---- Transformations of N and V ----
def comp_type_token_ratio(N: int, V: int) -> float:
    return V / N if N != 0 else 0.0


def comp_mean_word_frequency(N: int, V: int) -> float:
    return N / V if V != 0 else 0.0


def comp_guiraud_r(N: int, V: int) -> float:
    return V / math.sqrt(N) if N != 0 else 0.0


def comp_herdan_c(N: int, V: int) -> float:
    if N in (0, 1):
        return 0.0
    return math.log10(V) / math.log10(N)


def comp_rupet_k(N: int, V: int) -> float:
    # N == 10 makes log(log(N)) == 0
    if N > 1 and V > 1 and N != 10:
        return math.log10(V) / math.log10(math.log10(N))
    return 0.0


def comp_maas_a(N: int, V: int) -> float:
    if N <= 1:
        return 0.0
    log_n = math.log10(N)
    return (log_n - math.log10(V)) / log_n ** 2


def comp_dugast_u(N: int, V: int) -> float:
    if N > 1 and V > 1 and N != V:
        log_n = math.log10(N)
        return log_n ** 2 / (log_n - math.log10(V))
    return 0.0


def comp_lukjanenkov_neistoj(N: int, V: int) -> float:
    if N <= 1:
        return 0.0
    return (1 - V ** 2) / (V ** 2 * math.log10(N))


def comp_brunet_w(N: int, V: int, a: float = BRUNET_A) -> float:
    """
    Brunet's W = N ^ (V ^ -a). Unguarded: V = 0 yields whatever IEEE
    power yields (an infinite exponent) instead of raising.
    """
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        return float(np.float_power(N, np.float_power(V, -a)))


# ---- Frequency spectrum: partial ----
def comp_sichel_s(N: int, V: int, freq_freq: Mapping[int, int]) -> float:
    freq2 = freq_freq.get(2, 0)
    return freq2 / V if V != 0 else 0.0


def comp_michea_m(N: int, V: int, freq_freq: Mapping[int, int]) -> float:
    freq2 = freq_freq.get(2, 0)
    return V / freq2 if freq2 != 0 else 0.0


def comp_honore_h(
    N: int,
    V: int,
    freq_freq: Mapping[int, int],
    a: float = HONORE_A,
    b: float = HONORE_B,
) -> float:
    """
    Honore's H = b * log(N) / (a - V(1,N)/V).

    Only N > 1 and V > 1 are guarded. When every type is a hapax the
    denominator is 0 and the result is unbounded (inf).
    """
    if not (N > 1 and V > 1):
        return 0.0
    freq1 = freq_freq.get(1, 0)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(b * math.log10(N), np.float64(a - freq1 / V)))


# ---- Frequency spectrum: full ----
def _spectrum_square_sum(N: int, freq_freq: Mapping[int, int]) -> float:
    return sum(v * (i / N) ** 2 for i, v in freq_freq.items())


def comp_yule_k(N: int, V: int, freq_freq: Mapping[int, int], scale: float = YULE_SCALE) -> float:
    if N == 0:
        return 0.0
    return scale * (-1 / N + _spectrum_square_sum(N, freq_freq))


def comp_simpson_d(N: int, V: int, freq_freq: Mapping[int, int]) -> float:
    if N <= 1:
        return 0.0
    return sum(v * (i / N) * ((i - 1) / (N - 1)) for i, v in freq_freq.items())


def comp_herdan_v(N: int, V: int, freq_freq: Mapping[int, int]) -> float:
    if N == 0 or V == 0:
        return 0.0
    # never below 0 in exact arithmetic; clamp float rounding
    return math.sqrt(max(_spectrum_square_sum(N, freq_freq) - 1 / V, 0.0))


def comp_good_c(N: int, V: int, freq_freq: Mapping[int, int], s: float, t: float) -> float:
    """Good's measure: sum of V(i,N) * (-log(i/N))^s * (i/N)^t."""
    if N == 0:
        return 0.0
    c = 0.0
    for i, v in freq_freq.items():
        p = i / N
        c += v * (-math.log10(p)) ** s * p ** t
    return c


def comp_entropy(N: int, V: int, freq_freq: Mapping[int, int]) -> float:
    return comp_good_c(N, V, freq_freq, 1, 1)


# ---- Ratio lookups ----
def comp_frequency_ratio(freq_ratios: Mapping[int, float], freq: int) -> float:
    return freq_ratios.get(freq, 0.0)


def comp_hapax_legomena(freq_ratios: Mapping[int, float]) -> float:
    return comp_frequency_ratio(freq_ratios, 1)


def comp_hapax_dislegomena(freq_ratios: Mapping[int, float]) -> float:
    return comp_frequency_ratio(freq_ratios, 2)


def comp_length_frequency_ratio(
    len_ratios: Mapping[int, float],
    min_len: int = SHORT_WORD_MIN,
    max_len: int = SHORT_WORD_MAX,
) -> float:
    """Sum of length ratios over [min_len, max_len]."""
    if not len_ratios:
        return 0.0
    return sum(len_ratios.get(length, 0.0) for length in range(min_len, max_len + 1))


class LexicalRichness:
    """Stateless apart from its immutable configuration."""

    def __init__(self, config: Optional[LexicalConfig] = None):
        self.config = config or LexicalConfig()

    def doc2words(self, doc) -> List[str]:
        """Tokenize `doc`; unusable input counts as a document with no tokens."""
        try:
            words = tokenize(doc)
        except InvalidInput:
            return []
        if self.config.alpha_only:
            words = [w for w in words if is_alphabetic(w)]
        return words

    def get_basic_counts(self, doc) -> Tuple[int, int]:
        """Return (N, V)."""
        words = self.doc2words(doc)
        return comp_word_count(words), comp_vocabulary_size(words)

    def compute_all(self, doc) -> Dict[str, float]:
        words = self.doc2words(doc)

        out: Dict[str, float] = {}
        out.update(self.get_type_token_metrics(words))
        out.update(self.get_length_metrics(words))
        out.update(self.get_length_ratio_metrics(words))
        out.update(self.get_frequency_metrics(words))
        out.update(self.get_frequency_ratio_metrics(words))
        return out

    def get_type_token_metrics(self, doc) -> Dict[str, float]:
        N, V = self.get_basic_counts(doc)
        if N == 0:
            return {}

        return {
            "WordCount": N,
            "VocabularySize": V,
            "TypeTokenRatio": comp_type_token_ratio(N, V),
            "MeanWordFrequency": comp_mean_word_frequency(N, V),
            "GuiraudR": comp_guiraud_r(N, V),
            "HerdanC": comp_herdan_c(N, V),
            "RupetK": comp_rupet_k(N, V),
            "MaasA": comp_maas_a(N, V),
            "DugastU": comp_dugast_u(N, V),
            "LukjanenkovNeistoj": comp_lukjanenkov_neistoj(N, V),
            "BrunetW": comp_brunet_w(N, V, self.config.brunet_a),
        }

    def get_length_metrics(self, doc) -> Dict[str, float]:
        words = self.doc2words(doc)
        if not words:
            return {}
        return {"AverageWordLength": comp_average_word_length(words)}

    def get_length_ratio_metrics(
        self,
        doc,
        min_len: Optional[int] = None,
        max_len: Optional[int] = None,
    ) -> Dict[str, float]:
        words = self.doc2words(doc)
        if not words:
            return {}

        cfg = self.config
        lo = cfg.short_min if min_len is None else min_len
        hi = cfg.short_max if max_len is None else max_len

        N = comp_word_count(words)
        len_freq = comp_length_frequencies(words, cfg.length_min, cfg.length_max)
        len_ratios = comp_length_ratios(N, len_freq)

        out = {"ShortWordRatio": comp_length_frequency_ratio(len_ratios, lo, hi)}
        for length in range(lo, hi + 1):
            out[f"LengthRatio-{length}"] = len_ratios.get(length, 0.0)
        return out

    def get_frequency_metrics(self, doc) -> Dict[str, float]:
        words = self.doc2words(doc)
        if not words:
            return {}

        cfg = self.config
        N, V = comp_word_count(words), comp_vocabulary_size(words)
        freq_freq = comp_type_freq_frequencies(words)

        return {
            # partial spectrum
            "SichelS": comp_sichel_s(N, V, freq_freq),
            "MicheaM": comp_michea_m(N, V, freq_freq),
            "HonoreH": comp_honore_h(N, V, freq_freq, cfg.honore_a, cfg.honore_b),
            # full spectrum
            "Entropy": comp_entropy(N, V, freq_freq),
            "YuleK": comp_yule_k(N, V, freq_freq, cfg.yule_scale),
            "SimpsonD": comp_simpson_d(N, V, freq_freq),
            "HerdanV": comp_herdan_v(N, V, freq_freq),
        }

    def get_frequency_ratio_metrics(self, doc) -> Dict[str, float]:
        words = self.doc2words(doc)
        if not words:
            return {}

        N = comp_word_count(words)
        freq_ratios = comp_frequency_ratios(N, comp_type_freq_frequencies(words))

        return {
            "HapaxLegomenaRatio": comp_hapax_legomena(freq_ratios),
            "HapaxDislegomenaRatio": comp_hapax_dislegomena(freq_ratios),
        }
