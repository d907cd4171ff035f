"""Tests for page paths and links derived from the item hierarchy."""

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_item_kind import ApiItemKind
from api_documenter_hugo.api_model import ApiModel
from api_documenter_hugo.filename_for_item import filename_for_item
from api_documenter_hugo.link_for_item import link_for_item
from conftest import PKG, find


def _walk(item: ApiItem) -> list[ApiItem]:
    items = [item]
    for member in item.members:
        items.extend(_walk(member))
    return items


def test_paths_for_overloaded_constructors(api_model: ApiModel) -> None:
    """Verify the documented path examples for a class and its constructors."""
    widget = find(api_model, f"{PKG}!Widget:class")
    first = find(api_model, f"{PKG}!Widget:constructor(1)")
    second = find(api_model, f"{PKG}!Widget:constructor(2)")
    assert filename_for_item(widget) == "widgets/Widget/_index"
    assert filename_for_item(first) == "widgets/Widget/constructor/_index"
    assert filename_for_item(second) == "widgets/Widget/constructor_1/_index"


def test_paths_for_model_package_and_entry_point(api_model: ApiModel) -> None:
    """Verify the root, package and default entry point paths."""
    package = api_model.packages[0]
    entry_point = package.members[0]
    assert filename_for_item(api_model) == "_index"
    assert filename_for_item(package) == "widgets/_root/_index"
    assert filename_for_item(entry_point) == "widgets/_root/_index"


def test_variable_prefix(api_model: ApiModel) -> None:
    """Verify that variables are prefixed so they cannot clash with types."""
    variable = find(api_model, f"{PKG}!VERSION:var")
    assert filename_for_item(variable) == "widgets/var_VERSION/_index"


def test_enum_members_share_the_enum_path(api_model: ApiModel) -> None:
    """Verify that enum members contribute no segment of their own."""
    red = find(api_model, f"{PKG}!Color.Red:member")
    assert filename_for_item(red) == "widgets/Color/_index"


def test_named_entry_point_path() -> None:
    """Verify that a sub-path entry point gets one escaped segment."""
    entry_point = ApiItem(kind=ApiItemKind.ENTRY_POINT, name="testing")
    entry_point.add_member(ApiItem(kind=ApiItemKind.FUNCTION, name="mount"))
    package = ApiItem(kind=ApiItemKind.PACKAGE, name=PKG, members=[entry_point])
    ApiModel([package])
    assert filename_for_item(entry_point) == "widgets/widgets_2f_testing/_index"
    assert (
        filename_for_item(entry_point.members[0])
        == "widgets/widgets_2f_testing/mount/_index"
    )


def test_paths_are_unique_and_stable(api_model: ApiModel) -> None:
    """Verify that no two page-owning items share a path, run after run."""
    items = [
        item
        for item in _walk(api_model)
        if item.kind != ApiItemKind.ENUM_MEMBER
        and not (item.kind == ApiItemKind.ENTRY_POINT and not item.import_path)
    ]
    paths = [filename_for_item(item) for item in items]
    assert len(set(paths)) == len(paths)
    assert paths == [filename_for_item(item) for item in items]


def test_overloads_and_variables_do_not_collide() -> None:
    """Verify the overload suffix and variable prefix against look-alike names."""
    entry_point = ApiItem(
        kind=ApiItemKind.ENTRY_POINT,
        members=[
            ApiItem(kind=ApiItemKind.FUNCTION, name="load", overload_index=1),
            ApiItem(kind=ApiItemKind.FUNCTION, name="load", overload_index=2),
            ApiItem(kind=ApiItemKind.FUNCTION, name="load_1", overload_index=1),
            ApiItem(kind=ApiItemKind.VARIABLE, name="load"),
            ApiItem(kind=ApiItemKind.CLASS, name="var_load"),
        ],
    )
    ApiModel([ApiItem(kind=ApiItemKind.PACKAGE, name="pkg", members=[entry_point])])
    paths = [filename_for_item(member) for member in entry_point.members]
    assert paths == [
        "pkg/load/_index",
        "pkg/load_1/_index",
        "pkg/load__1/_index",
        "pkg/var_load/_index",
        "pkg/var__load/_index",
    ]


def test_link_for_item(api_model: ApiModel) -> None:
    """Verify that links are the base URL plus the page path."""
    widget = find(api_model, f"{PKG}!Widget:class")
    assert link_for_item(widget, "/docs") == "/docs/widgets/Widget/_index.md"
    assert link_for_item(widget, "/api/") == "/api/widgets/Widget/_index.md"
    assert link_for_item(api_model, "/docs") == "/docs/_index.md"


def test_merged_declarations_get_distinct_paths() -> None:
    """Verify that same-named declarations of different kinds do not share a page."""
    namespace = ApiItem(
        kind=ApiItemKind.NAMESPACE,
        name="foo",
        members=[ApiItem(kind=ApiItemKind.FUNCTION, name="bar", overload_index=1)],
    )
    entry_point = ApiItem(
        kind=ApiItemKind.ENTRY_POINT,
        members=[
            ApiItem(kind=ApiItemKind.FUNCTION, name="foo", overload_index=1),
            ApiItem(kind=ApiItemKind.FUNCTION, name="foo", overload_index=2),
            namespace,
            ApiItem(kind=ApiItemKind.CLASS, name="Shape"),
            ApiItem(kind=ApiItemKind.INTERFACE, name="Shape"),
            ApiItem(kind=ApiItemKind.CLASS, name="foo_namespace"),
        ],
    )
    ApiModel([ApiItem(kind=ApiItemKind.PACKAGE, name="pkg", members=[entry_point])])
    paths = [filename_for_item(member) for member in entry_point.members]
    assert paths == [
        "pkg/foo/_index",
        "pkg/foo_1/_index",
        "pkg/foo_namespace/_index",
        "pkg/Shape/_index",
        "pkg/Shape_interface/_index",
        "pkg/foo__namespace/_index",
    ]
    assert filename_for_item(namespace.members[0]) == "pkg/foo_namespace/bar/_index"


def test_signatures_without_pages_use_the_owner_path() -> None:
    """Verify that call and index signatures resolve to their owner's page."""
    call = ApiItem(kind=ApiItemKind.CALL_SIGNATURE, overload_index=1)
    index = ApiItem(kind=ApiItemKind.INDEX_SIGNATURE, overload_index=1)
    handler = ApiItem(kind=ApiItemKind.INTERFACE, name="Handler", members=[call, index])
    entry_point = ApiItem(kind=ApiItemKind.ENTRY_POINT, members=[handler])
    ApiModel([ApiItem(kind=ApiItemKind.PACKAGE, name="pkg", members=[entry_point])])
    assert filename_for_item(call) == "pkg/Handler/_index"
    assert filename_for_item(index) == "pkg/Handler/_index"
    assert link_for_item(call, "/docs") == "/docs/pkg/Handler/_index.md"
