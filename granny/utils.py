"""Console helpers shared by the loader, the search and the command line."""

from tqdm import tqdm


def progress(iterable, desc="", total=None):
    return tqdm(iterable, desc=desc, total=total, ascii=" ▖▘▝▗▚▞█", bar_format='{desc}: |{bar:20}|')
