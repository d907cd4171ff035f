"""Kind-specific tables listing an item's members.

Each ``write_*`` method appends headings and tables to a page body and returns
the members whose own pages must be written before that page, in table order.
Tables that end up without rows are left out together with their heading.
"""

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_item_kind import ApiItemKind, has_return_type
from api_documenter_hugo.custom_doc_nodes import (
    DocHeading,
    DocTable,
    DocTableCell,
    DocTableRow,
)
from api_documenter_hugo.doc_comment import StandardTags
from api_documenter_hugo.doc_nodes import DocSection
from api_documenter_hugo.table_cells import TableCells

PROPERTY_HEADERS = ["Property", "Modifiers", "Type", "Description"]

# Table title and header row, in the order the tables appear on the page.
CONTAINER_TABLES = [
    ("Classes", ["Class", "Description"]),
    ("Abstract Classes", ["Abstract Class", "Description"]),
    ("Enumerations", ["Enumeration", "Description"]),
    ("Functions", ["Function", "Description"]),
    ("Interfaces", ["Interface", "Description"]),
    ("Namespaces", ["Namespace", "Description"]),
    ("Variables", ["Variable", "Description"]),
    ("Type Aliases", ["Type Alias", "Description"]),
]

CONTAINER_TABLE_FOR_KIND = {
    ApiItemKind.CLASS: "Classes",
    ApiItemKind.ENUM: "Enumerations",
    ApiItemKind.FUNCTION: "Functions",
    ApiItemKind.INTERFACE: "Interfaces",
    ApiItemKind.NAMESPACE: "Namespaces",
    ApiItemKind.VARIABLE: "Variables",
    ApiItemKind.TYPE_ALIAS: "Type Aliases",
}


class MemberTables:
    """Writes the member tables of container, type and function pages."""

    def __init__(self, cells: TableCells) -> None:
        """Use ``cells`` to create every row."""
        self.cells = cells
        self.configuration = cells.configuration

    def table(self, header_titles: list[str]) -> DocTable:
        """An empty table with the given header row."""
        return DocTable(self.configuration, header_titles=header_titles)

    def row(self, cells: list[DocTableCell]) -> DocTableRow:
        """A table row holding ``cells``."""
        return DocTableRow(self.configuration, cells)

    def append_table(self, output: DocSection, title: str, table: DocTable) -> None:
        """Append a heading and ``table`` unless the table has no rows."""
        if table.rows:
            output.append_node(DocHeading(self.configuration, title=title))
            output.append_node(table)

    def write_model_table(self, output: DocSection, model: ApiItem) -> list[ApiItem]:
        """The Packages table of the model page."""
        packages = self.table(["Package", "Description"])
        children: list[ApiItem] = []
        for member in model.members:
            if member.kind == ApiItemKind.PACKAGE:
                packages.add_row(
                    self.row(
                        [
                            self.cells.title_cell(member),
                            self.cells.description_cell(member),
                        ]
                    )
                )
                children.append(member)
        self.append_table(output, "Packages", packages)
        return children

    def write_package_tables(
        self,
        output: DocSection,
        package: ApiItem,
    ) -> list[ApiItem]:
        """Entry points, then every entry point's members grouped by kind."""
        entry_points = self.table(["Path"])
        children: list[ApiItem] = []
        for entry_point in package.members:
            link_text = package.name
            if entry_point.import_path:
                link_text += f"/{entry_point.import_path}"
            entry_points.add_row(
                self.row(
                    [
                        self.cells.cell(
                            [
                                self.cells.paragraph(
                                    [self.cells.link_tag(entry_point, link_text)]
                                )
                            ]
                        )
                    ]
                )
            )
            if entry_point.import_path:
                children.append(entry_point)

        # The main entry point is always listed; one row alone is not worth a table.
        if len(entry_points.rows) > 1:
            self.append_table(output, "Entrypoints", entry_points)

        members = [m for entry_point in package.members for m in entry_point.members]
        children.extend(self._write_container_tables(output, members))
        return children

    def write_namespace_tables(
        self,
        output: DocSection,
        namespace: ApiItem,
    ) -> list[ApiItem]:
        """The namespace's members grouped by kind."""
        return self._write_container_tables(output, namespace.members)

    def write_entry_point_tables(
        self,
        output: DocSection,
        entry_point: ApiItem,
    ) -> list[ApiItem]:
        """Links to the entry point's members; the package page writes their pages."""
        self._write_container_tables(output, entry_point.members)
        return []

    def _write_container_tables(
        self,
        output: DocSection,
        members: list[ApiItem],
    ) -> list[ApiItem]:
        tables = {title: self.table(headers) for title, headers in CONTAINER_TABLES}
        children: list[ApiItem] = []
        for member in members:
            title = CONTAINER_TABLE_FOR_KIND.get(member.kind)
            if title is None:
                continue
            if member.kind == ApiItemKind.CLASS and member.is_abstract:
                title = "Abstract Classes"
            tables[title].add_row(
                self.row(
                    [
                        self.cells.title_cell(member),
                        self.cells.description_cell(member),
                    ]
                )
            )
            children.append(member)

        for title, _ in CONTAINER_TABLES:
            self.append_table(output, title, tables[title])
        return children

    def write_class_tables(
        self,
        output: DocSection,
        owner: ApiItem,
        members: list[ApiItem],
    ) -> list[ApiItem]:
        """Events, constructors, properties and methods of a class."""
        events = self.table(PROPERTY_HEADERS)
        constructors = self.table(["Constructor", "Modifiers", "Description"])
        properties = self.table(PROPERTY_HEADERS)
        methods = self.table(["Method", "Modifiers", "Description"])
        children: list[ApiItem] = []

        for member in members:
            is_inherited = member.parent is not owner
            description = self.cells.description_cell(
                member, is_inherited=is_inherited
            )
            if member.kind in (ApiItemKind.CONSTRUCTOR, ApiItemKind.METHOD):
                target = (
                    constructors if member.kind == ApiItemKind.CONSTRUCTOR else methods
                )
                target.add_row(
                    self.row(
                        [
                            self.cells.title_cell(member),
                            self.cells.modifiers_cell(member),
                            description,
                        ]
                    )
                )
            elif member.kind == ApiItemKind.PROPERTY:
                target = events if member.is_event_property else properties
                target.add_row(self._property_row(member, description))
            else:
                continue
            if not is_inherited:
                children.append(member)

        self.append_table(output, "Events", events)
        self.append_table(output, "Constructors", constructors)
        self.append_table(output, "Properties", properties)
        self.append_table(output, "Methods", methods)
        return children

    def write_interface_tables(
        self,
        output: DocSection,
        owner: ApiItem,
        members: list[ApiItem],
    ) -> list[ApiItem]:
        """Events, properties and methods of an interface."""
        events = self.table(PROPERTY_HEADERS)
        properties = self.table(PROPERTY_HEADERS)
        methods = self.table(["Method", "Description"])
        children: list[ApiItem] = []

        for member in members:
            is_inherited = member.parent is not owner
            description = self.cells.description_cell(
                member, is_inherited=is_inherited
            )
            if member.kind in (
                ApiItemKind.CONSTRUCT_SIGNATURE,
                ApiItemKind.METHOD_SIGNATURE,
            ):
                methods.add_row(
                    self.row([self.cells.title_cell(member), description])
                )
            elif member.kind == ApiItemKind.PROPERTY_SIGNATURE:
                target = events if member.is_event_property else properties
                target.add_row(self._property_row(member, description))
            else:
                continue
            if not is_inherited:
                children.append(member)

        self.append_table(output, "Events", events)
        self.append_table(output, "Properties", properties)
        self.append_table(output, "Methods", methods)
        return children

    def _property_row(
        self,
        member: ApiItem,
        description: DocTableCell,
    ) -> DocTableRow:
        return self.row(
            [
                self.cells.title_cell(member),
                self.cells.modifiers_cell(member),
                self.cells.property_type_cell(member),
                description,
            ]
        )

    def write_enum_tables(self, output: DocSection, enum: ApiItem) -> list[ApiItem]:
        """The members of an enum, inlined with their values."""
        members = self.table(["Member", "Value", "Description"])
        for member in enum.members:
            members.add_row(
                self.row(
                    [
                        self.cells.text_cell(member.get_concise_signature()),
                        self.cells.initializer_cell(member),
                        self.cells.description_cell(member),
                    ]
                )
            )
        self.append_table(output, "Enumeration Members", members)
        return []

    def write_parameter_tables(
        self,
        output: DocSection,
        item: ApiItem,
    ) -> list[ApiItem]:
        """Parameters, return type and thrown exceptions of a function-like item."""
        parameters = self.table(["Parameter", "Type", "Description"])
        for parameter in item.parameters:
            description = DocSection(self.configuration)
            if parameter.is_optional:
                description.append_nodes_in_paragraph(
                    [
                        self.cells.emphasis("(Optional)", italic=True),
                        self.cells.plain(" "),
                    ]
                )
            param_block = parameter.tsdoc_param_block
            if param_block is not None:
                self.cells.append_and_merge_section(description, param_block.content)

            parameters.add_row(
                self.row(
                    [
                        self.cells.text_cell(parameter.name),
                        self.cells.cell(
                            [self.cells.type_paragraph(parameter.type_excerpt)]
                        ),
                        self.cells.cell(list(description.nodes)),
                    ]
                )
            )
        self.append_table(output, "Parameters", parameters)

        if has_return_type(item.kind):
            output.append_node(self.cells.paragraph())
            output.append_node(self.cells.bold_paragraph("Returns:"))
            output.append_node(self.cells.type_paragraph(item.return_type_excerpt))
            comment = item.doc_comment
            if comment is not None and comment.returns_block is not None:
                self.cells.append_section(output, comment.returns_block.content)

        self._write_throws_section(output, item)
        return []

    def _write_throws_section(self, output: DocSection, item: ApiItem) -> None:
        if item.doc_comment is None:
            return
        throws_blocks = item.doc_comment.blocks_with_tag(StandardTags.THROWS)
        if throws_blocks:
            output.append_node(DocHeading(self.configuration, title="Exceptions"))
            for block in throws_blocks:
                self.cells.append_section(output, block.content)
