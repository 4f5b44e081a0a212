from typing import List, Tuple


def read_files_as_candidates(files):
    """Decode uploaded files (UTF-8, bad bytes dropped); returns (texts, names)."""
    texts, names = [], []
    if not files:
        return texts, names
    for f in files:
        data = f.read()
        try:
            txt = data.decode("utf-8", errors="ignore")
        except AttributeError:
            txt = str(data)
        texts.append(txt.strip())
        names.append(getattr(f, "name", "uploaded.txt"))
    return texts, names


def split_candidates(block: str) -> List[str]:
    # one candidate per non-blank line
    return [line.strip() for line in (block or "").splitlines() if line.strip()]


def rank_labels(labels: List[str], ratings: List[float]) -> List[Tuple[str, float]]:
    """(label, ratio) pairs by descending ratio; equal ratios keep input order."""
    order = sorted(range(len(ratings)), key=lambda i: -ratings[i])
    return [(labels[i], ratings[i]) for i in order]
