from sqlalchemy import BigInteger, Integer

# SQLite only auto-increments columns declared exactly as INTEGER PRIMARY KEY.
Identifier = BigInteger().with_variant(Integer(), "sqlite")

__all__ = ["Identifier"]
