from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from sqlalchemy.orm import Session

from themekit.core.config import settings

_MYSQL_DIALECTS = {"mysql", "mariadb"}
_MYSQL_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        "\x00": "\\0",
        "\n": "\\n",
        "\r": "\\r",
        "\x1a": "\\Z",
        "'": "\\'",
        '"': '\\"',
    }
)
_RANDOM_FUNCTIONS = {"mysql": "RAND()", "mariadb": "RAND()", "mssql": "NEWID()"}


class DataStore(Protocol):
    users_table: str
    usermeta_table: str

    @property
    def random_function(self) -> str:
        ...

    def escape(self, value: Any) -> str:
        ...

    def quote_identifier(self, name: str) -> str:
        ...

    def execute_query(self, sql: str) -> Sequence[Mapping[str, Any]]:
        ...


class SqlAlchemyDataStore:
    """Read-only access to the users/usermeta tables through a SQLAlchemy session.

    Statements arrive as finished SQL text, so everything interpolated into them
    must go through ``escape`` (literals) or ``quote_identifier`` (names) first.
    """

    def __init__(
        self,
        db: Session,
        *,
        users_table: str | None = None,
        usermeta_table: str | None = None,
    ):
        self.db = db
        self.users_table = users_table or settings.users_table
        self.usermeta_table = usermeta_table or settings.usermeta_table
        self._dialect = db.get_bind().dialect

    @property
    def dialect_name(self) -> str:
        return str(self._dialect.name)

    @property
    def random_function(self) -> str:
        return _RANDOM_FUNCTIONS.get(self.dialect_name, "RANDOM()")

    def escape(self, value: Any) -> str:
        text = "" if value is None else str(value)
        if self.dialect_name in _MYSQL_DIALECTS:
            return text.translate(_MYSQL_ESCAPES)
        return text.replace("\x00", "").replace("'", "''")

    def quote_identifier(self, name: str) -> str:
        return self._dialect.identifier_preparer.quote_identifier(str(name).replace("\x00", ""))

    def execute_query(self, sql: str) -> list[Mapping[str, Any]]:
        # Driver-level execution: no bind-parameter parsing of ":name" or "%" inside literals.
        result = self.db.connection().exec_driver_sql(sql, execution_options={"no_parameters": True})
        return list(result.mappings().all())
