"""Kind tags for describable items and the capabilities each kind carries."""


class ApiItemKind:
    """Item kinds as written in ``*.api.json`` files."""

    MODEL = "Model"
    PACKAGE = "Package"
    ENTRY_POINT = "EntryPoint"
    NAMESPACE = "Namespace"
    CLASS = "Class"
    INTERFACE = "Interface"
    ENUM = "Enum"
    ENUM_MEMBER = "EnumMember"
    FUNCTION = "Function"
    VARIABLE = "Variable"
    TYPE_ALIAS = "TypeAlias"
    CONSTRUCTOR = "Constructor"
    METHOD = "Method"
    PROPERTY = "Property"
    CONSTRUCT_SIGNATURE = "ConstructSignature"
    METHOD_SIGNATURE = "MethodSignature"
    PROPERTY_SIGNATURE = "PropertySignature"
    CALL_SIGNATURE = "CallSignature"
    INDEX_SIGNATURE = "IndexSignature"


ALL_KINDS = frozenset(
    value
    for key, value in vars(ApiItemKind).items()
    if not key.startswith("_") and isinstance(value, str)
)

PARAMETER_LIST_KINDS = frozenset(
    {
        ApiItemKind.CONSTRUCTOR,
        ApiItemKind.CONSTRUCT_SIGNATURE,
        ApiItemKind.METHOD,
        ApiItemKind.METHOD_SIGNATURE,
        ApiItemKind.FUNCTION,
        ApiItemKind.CALL_SIGNATURE,
        ApiItemKind.INDEX_SIGNATURE,
    }
)

RETURN_TYPE_KINDS = frozenset(
    {
        ApiItemKind.CONSTRUCT_SIGNATURE,
        ApiItemKind.METHOD,
        ApiItemKind.METHOD_SIGNATURE,
        ApiItemKind.FUNCTION,
        ApiItemKind.CALL_SIGNATURE,
        ApiItemKind.INDEX_SIGNATURE,
    }
)

PROPERTY_KINDS = frozenset({ApiItemKind.PROPERTY, ApiItemKind.PROPERTY_SIGNATURE})

OPTIONAL_KINDS = frozenset(
    {
        ApiItemKind.PROPERTY,
        ApiItemKind.PROPERTY_SIGNATURE,
        ApiItemKind.METHOD,
        ApiItemKind.METHOD_SIGNATURE,
    }
)

# Items outside this set carry no release tag, signature excerpt or flags.
DECLARED_KINDS = ALL_KINDS - {
    ApiItemKind.MODEL,
    ApiItemKind.PACKAGE,
    ApiItemKind.ENTRY_POINT,
}

PAGE_KINDS = frozenset(
    {
        ApiItemKind.MODEL,
        ApiItemKind.PACKAGE,
        ApiItemKind.ENTRY_POINT,
        ApiItemKind.NAMESPACE,
        ApiItemKind.CLASS,
        ApiItemKind.INTERFACE,
        ApiItemKind.ENUM,
        ApiItemKind.FUNCTION,
        ApiItemKind.VARIABLE,
        ApiItemKind.TYPE_ALIAS,
        ApiItemKind.CONSTRUCTOR,
        ApiItemKind.METHOD,
        ApiItemKind.PROPERTY,
        ApiItemKind.CONSTRUCT_SIGNATURE,
        ApiItemKind.METHOD_SIGNATURE,
        ApiItemKind.PROPERTY_SIGNATURE,
    }
)


def has_parameter_list(kind: str) -> bool:
    """Check whether items of this kind declare parameters and overloads."""
    return kind in PARAMETER_LIST_KINDS


def has_return_type(kind: str) -> bool:
    """Check whether items of this kind declare a return type."""
    return kind in RETURN_TYPE_KINDS


def is_page_kind(kind: str) -> bool:
    """Check whether items of this kind own an output page."""
    return kind in PAGE_KINDS
