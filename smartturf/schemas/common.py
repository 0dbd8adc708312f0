from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from smartturf.core.time_utils import as_utc

# Largest value a BIGINT identifier column can hold.
MAX_IDENTIFIER = 2**63 - 1

# Datetimes are exchanged in UTC; naive input is read as UTC.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]

__all__ = ["MAX_IDENTIFIER", "UtcDatetime"]
