"""SA ID Number - parse, build, validate and generate South African ID numbers."""

from sa_idnumber.core import (
    from_string,
    is_valid,
    new_id,
    new_id_number,
    random_id_number,
)
from sa_idnumber.models import Citizenship, IDNumber

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Citizenship",
    "IDNumber",
    "new_id_number",
    "new_id",
    "from_string",
    "is_valid",
    "random_id_number",
]
