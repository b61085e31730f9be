"""Column expression parsing for HBaseSearch extractors.

Expressions have the form ``family:qualifier``. The qualifier may be ``*``
to address the whole family, or end in ``*`` to address every qualifier
starting with the text before it.
"""

from core.exceptions import ConfigurationError
from core.models import ColumnAddress, FixedColumn, QualifierPrefix, WholeFamily
from core.types import ColumnFamily, ColumnQualifier

WILDCARD = "*"


def parse_column_expression(expression: str) -> ColumnAddress:
    """Parse a column expression into a column address.

    Args:
        expression: Expression such as "content:title", "meta:*" or "meta:tag*"

    Returns:
        FixedColumn, WholeFamily or QualifierPrefix

    Raises:
        ConfigurationError: If the expression does not address a valid column
    """
    if expression is None or not str(expression).strip():
        raise ConfigurationError("value_expression", expression, "Expression cannot be empty")

    text = str(expression).strip()
    family, separator, qualifier = text.partition(":")

    if not separator:
        raise ConfigurationError(
            "value_expression", expression,
            "Expression must have the form 'family:qualifier'"
        )

    if not family:
        raise ConfigurationError("value_expression", expression, "Column family cannot be empty")

    if WILDCARD in family:
        raise ConfigurationError(
            "value_expression", expression, "Wildcards are not supported in the column family"
        )

    if not qualifier:
        raise ConfigurationError(
            "value_expression", expression,
            "Column qualifier cannot be empty, use '*' to address the whole family"
        )

    if WILDCARD in qualifier[:-1]:
        raise ConfigurationError(
            "value_expression", expression,
            "A wildcard is only allowed at the end of the qualifier"
        )

    family_bytes = ColumnFamily(family.encode("utf-8"))

    if qualifier == WILDCARD:
        return WholeFamily(family=family_bytes)

    if qualifier.endswith(WILDCARD):
        return QualifierPrefix(family=family_bytes, prefix=qualifier[:-1].encode("utf-8"))

    return FixedColumn(family=family_bytes, qualifier=ColumnQualifier(qualifier.encode("utf-8")))
