from .identifiers import IdentifierRule
from .importers import (
    import_coh,
    import_gamet,
    import_merge_gamet_rb,
    import_rb,
    merge_rb_gamet,
)
from .samples import SAMPLE_FILES, sample_path
from .schemas import ID_COLUMN, SchemaError

__all__ = [
    "IdentifierRule",
    "import_coh",
    "import_gamet",
    "import_merge_gamet_rb",
    "import_rb",
    "merge_rb_gamet",
    "SAMPLE_FILES",
    "sample_path",
    "ID_COLUMN",
    "SchemaError",
]
