from writealizer.config import EXTDATA_DIR


SAMPLE_FILES = ("sample_rb.csv", "sample_coh.csv", "sample_gamet.csv")


def sample_path(name):
    """Return the absolute path of a sample export bundled with the package."""

    if name not in SAMPLE_FILES:
        raise FileNotFoundError(
            f"No bundled sample named {name!r}; choose one of: {', '.join(SAMPLE_FILES)}"
        )
    return EXTDATA_DIR / name


__all__ = ["SAMPLE_FILES", "sample_path"]
