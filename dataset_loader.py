import pandas as pd
from typing import List, Optional, Tuple

TEXT_COL = "text"
ID_COL = "id"


def load_split(path: str, text_col: str = TEXT_COL, id_col: str = ID_COL) -> Tuple[List[str], Optional[List[str]]]:
    """
    Read documents from a given jsonl file.
    Returns:
        texts: List[str]
        ids:   List[str], or None if the file has no id column
    """
    df = pd.read_json(path, lines=True)

    # Print basic info for inspection
    print(f"\nLoaded {path}")
    print("Shape:", df.shape)
    print("Columns:", df.columns.tolist())

    if text_col not in df.columns:
        raise KeyError(f"{path} has no '{text_col}' column")

    # Missing texts become empty documents
    texts = df[text_col].fillna("").astype(str).tolist()
    ids = df[id_col].astype(str).tolist() if id_col in df.columns else None

    return texts, ids


if __name__ == "__main__":
    texts, ids = load_split("train.jsonl")

    print("\nNumber of documents:", len(texts))

    # Print the first sample for inspection
    print("\nFirst text (first 300 chars):")
    print(texts[0][:300], "...")
    print("First id:", ids[0] if ids else None)
