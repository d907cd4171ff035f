"""Shared fixtures: a small but complete ``@scope/widgets`` API report."""

import json
from pathlib import Path
from typing import Any

import pytest

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_model import ApiModel
from api_documenter_hugo.build_api_model import build_api_model
from api_documenter_hugo.custom_doc_nodes import build_custom_configuration
from api_documenter_hugo.doc_nodes import DocConfiguration
from api_documenter_hugo.documenter_config import DocumenterConfig, NewlineKind

PKG = "@scope/widgets"


def content(text: str) -> dict[str, Any]:
    """A literal excerpt token."""
    return {"kind": "Content", "text": text}


def reference(text: str, canonical_reference: str) -> dict[str, Any]:
    """An excerpt token referring to another declaration."""
    return {
        "kind": "Reference",
        "text": text,
        "canonicalReference": canonical_reference,
    }


def token_range(start: int, end: int) -> dict[str, int]:
    """A ``*TokenRange`` field."""
    return {"startIndex": start, "endIndex": end}


BASE_CLASS = {
    "kind": "Class",
    "canonicalReference": f"{PKG}!Base:class",
    "docComment": "/**\n * Common base of all widgets.\n */\n",
    "excerptTokens": [content("export declare abstract class Base ")],
    "releaseTag": "Public",
    "isAbstract": True,
    "name": "Base",
    "members": [
        {
            "kind": "Method",
            "canonicalReference": f"{PKG}!Base#dispose:member(1)",
            "docComment": "/**\n * Releases resources.\n */\n",
            "excerptTokens": [content("dispose(): "), content("void"), content(";")],
            "isStatic": False,
            "returnTypeTokenRange": token_range(1, 2),
            "releaseTag": "Public",
            "isProtected": False,
            "overloadIndex": 1,
            "parameters": [],
            "isOptional": False,
            "isAbstract": False,
            "name": "dispose",
        }
    ],
}

WIDGET_CLASS = {
    "kind": "Class",
    "canonicalReference": f"{PKG}!Widget:class",
    "docComment": (
        "/**\n * A visual widget.\n *\n * @remarks\n"
        " * Widgets are drawn with {@link Widget.render}.\n *\n * @public\n */\n"
    ),
    "excerptTokens": [
        content("export declare class Widget extends "),
        reference("Base", f"{PKG}!Base:class"),
        content(" implements "),
        reference("Renderable", f"{PKG}!Renderable:interface"),
        content(" "),
    ],
    "releaseTag": "Public",
    "isAbstract": False,
    "name": "Widget",
    "extendsTokenRange": token_range(1, 2),
    "implementsTokenRanges": [token_range(3, 4)],
    "members": [
        {
            "kind": "Constructor",
            "canonicalReference": f"{PKG}!Widget:constructor(1)",
            "docComment": "/**\n * Creates an empty widget.\n */\n",
            "excerptTokens": [content("constructor();")],
            "releaseTag": "Public",
            "isProtected": False,
            "overloadIndex": 1,
            "parameters": [],
        },
        {
            "kind": "Constructor",
            "canonicalReference": f"{PKG}!Widget:constructor(2)",
            "docComment": (
                "/**\n * Creates a sized widget.\n *\n"
                " * @param size - Initial size.\n */\n"
            ),
            "excerptTokens": [
                content("constructor(size: "),
                reference("Size", f"{PKG}!Size:type"),
                content(");"),
            ],
            "releaseTag": "Public",
            "isProtected": False,
            "overloadIndex": 2,
            "parameters": [
                {
                    "parameterName": "size",
                    "parameterTypeTokenRange": token_range(1, 2),
                    "isOptional": False,
                }
            ],
        },
        {
            "kind": "Method",
            "canonicalReference": f"{PKG}!Widget#render:member(1)",
            "docComment": (
                "/**\n * Draws the widget.\n *\n"
                " * @returns `true` when something was drawn.\n *\n"
                " * @example\n * ```ts\n * new Widget().render();\n * ```\n */\n"
            ),
            "excerptTokens": [content("render(): "), content("boolean"), content(";")],
            "isStatic": False,
            "returnTypeTokenRange": token_range(1, 2),
            "releaseTag": "Public",
            "isProtected": False,
            "overloadIndex": 1,
            "parameters": [],
            "isOptional": False,
            "isAbstract": False,
            "name": "render",
        },
        {
            "kind": "Property",
            "canonicalReference": f"{PKG}!Widget#size:member",
            "docComment": "/**\n * Current size.\n */\n",
            "excerptTokens": [
                content("readonly size: "),
                reference("Size", f"{PKG}!Size:type"),
                content(";"),
            ],
            "isReadonly": True,
            "isOptional": False,
            "releaseTag": "Public",
            "name": "size",
            "propertyTypeTokenRange": token_range(1, 2),
            "isStatic": False,
            "isProtected": False,
            "isAbstract": False,
        },
        {
            "kind": "Property",
            "canonicalReference": f"{PKG}!Widget#onResize:member",
            "docComment": (
                "/**\n * Fired after the widget changes size.\n *\n"
                " * @eventProperty\n */\n"
            ),
            "excerptTokens": [
                content("readonly onResize: "),
                content("() => void"),
                content(";"),
            ],
            "isReadonly": True,
            "isOptional": False,
            "releaseTag": "Public",
            "name": "onResize",
            "propertyTypeTokenRange": token_range(1, 2),
            "isStatic": False,
            "isProtected": False,
            "isAbstract": False,
        },
    ],
}

SIZE_ALIAS = {
    "kind": "TypeAlias",
    "canonicalReference": f"{PKG}!Size:type",
    "docComment": "/**\n * Widget size.\n */\n",
    "excerptTokens": [
        content("export type Size = "),
        reference("Widget", f"{PKG}!Widget:class"),
        content(" | "),
        reference("Widget", f"{PKG}!Widget:class"),
        content("[];"),
    ],
    "releaseTag": "Public",
    "name": "Size",
    "typeTokenRange": token_range(1, 4),
}

COLOR_ENUM = {
    "kind": "Enum",
    "canonicalReference": f"{PKG}!Color:enum",
    "docComment": "/**\n * Widget colors.\n */\n",
    "excerptTokens": [content("export declare enum Color ")],
    "releaseTag": "Public",
    "name": "Color",
    "members": [
        {
            "kind": "EnumMember",
            "canonicalReference": f"{PKG}!Color.Red:member",
            "docComment": "/**\n * Bright red.\n */\n",
            "excerptTokens": [content("Red = "), content('"red"')],
            "initializerTokenRange": token_range(1, 2),
            "releaseTag": "Public",
            "name": "Red",
        },
        {
            "kind": "EnumMember",
            "canonicalReference": f"{PKG}!Color.Green:member",
            "excerptTokens": [content("Green = "), content('"green"')],
            "initializerTokenRange": token_range(1, 2),
            "releaseTag": "Public",
            "name": "Green",
        },
    ],
}

VERSION_VARIABLE = {
    "kind": "Variable",
    "canonicalReference": f"{PKG}!VERSION:var",
    "docComment": "/**\n * Library version.\n */\n",
    "excerptTokens": [content("VERSION: "), content("string")],
    "isReadonly": True,
    "releaseTag": "Public",
    "name": "VERSION",
    "variableTypeTokenRange": token_range(1, 2),
}

RENDERABLE_INTERFACE = {
    "kind": "Interface",
    "canonicalReference": f"{PKG}!Renderable:interface",
    "docComment": "/**\n * Something that can be drawn.\n */\n",
    "excerptTokens": [content("export interface Renderable ")],
    "releaseTag": "Public",
    "name": "Renderable",
    "extendsTokenRanges": [],
    "members": [
        {
            "kind": "MethodSignature",
            "canonicalReference": f"{PKG}!Renderable#draw:member(1)",
            "docComment": "/**\n * Draws onto a target.\n */\n",
            "excerptTokens": [
                content("draw(target: "),
                content("string"),
                content("): "),
                content("void"),
                content(";"),
            ],
            "isOptional": False,
            "returnTypeTokenRange": token_range(3, 4),
            "releaseTag": "Public",
            "overloadIndex": 1,
            "parameters": [
                {
                    "parameterName": "target",
                    "parameterTypeTokenRange": token_range(1, 2),
                    "isOptional": False,
                }
            ],
            "name": "draw",
        },
        {
            "kind": "PropertySignature",
            "canonicalReference": f"{PKG}!Renderable#visible:member",
            "excerptTokens": [content("visible?: "), content("boolean"), content(";")],
            "isReadonly": False,
            "isOptional": True,
            "releaseTag": "Public",
            "name": "visible",
            "propertyTypeTokenRange": token_range(1, 2),
        },
    ],
}

CREATE_WIDGET_FUNCTION = {
    "kind": "Function",
    "canonicalReference": f"{PKG}!createWidget:function(1)",
    "docComment": (
        "/**\n * Creates a widget.\n *\n"
        " * @param size - The initial size.\n"
        " * @returns The new widget.\n"
        " * @throws `RangeError` when the size is negative.\n"
        " * @example\n * Default size:\n * ```ts\n * createWidget();\n * ```\n"
        " * @example\n * ```ts\n * createWidget([]);\n * ```\n"
        " * @beta\n */\n"
    ),
    "excerptTokens": [
        content("export declare function createWidget(size?: "),
        reference("Size", f"{PKG}!Size:type"),
        content("): "),
        reference("Widget", f"{PKG}!Widget:class"),
        content(";"),
    ],
    "returnTypeTokenRange": token_range(3, 4),
    "releaseTag": "Beta",
    "overloadIndex": 1,
    "parameters": [
        {
            "parameterName": "size",
            "parameterTypeTokenRange": token_range(1, 2),
            "isOptional": True,
        }
    ],
    "name": "createWidget",
}

WIDGETS_PACKAGE = {
    "metadata": {"toolPackage": "@microsoft/api-extractor", "schemaVersion": 1011},
    "kind": "Package",
    "canonicalReference": f"{PKG}!",
    "docComment": (
        "/**\n * Widgets for dashboards.\n *\n * @packageDocumentation\n */\n"
    ),
    "name": PKG,
    "members": [
        {
            "kind": "EntryPoint",
            "canonicalReference": f"{PKG}!",
            "name": "",
            "members": [
                BASE_CLASS,
                WIDGET_CLASS,
                SIZE_ALIAS,
                COLOR_ENUM,
                VERSION_VARIABLE,
                RENDERABLE_INTERFACE,
                CREATE_WIDGET_FUNCTION,
            ],
        }
    ],
}

# Every page the sample package produces, relative to the output folder.
EXPECTED_PAGES = {
    "_index.md",
    "widgets/_root/_index.md",
    "widgets/Base/_index.md",
    "widgets/Base/dispose/_index.md",
    "widgets/Widget/_index.md",
    "widgets/Widget/constructor/_index.md",
    "widgets/Widget/constructor_1/_index.md",
    "widgets/Widget/render/_index.md",
    "widgets/Widget/size/_index.md",
    "widgets/Widget/onResize/_index.md",
    "widgets/Size/_index.md",
    "widgets/Color/_index.md",
    "widgets/var_VERSION/_index.md",
    "widgets/Renderable/_index.md",
    "widgets/Renderable/draw/_index.md",
    "widgets/Renderable/visible/_index.md",
    "widgets/createWidget/_index.md",
}


@pytest.fixture
def input_folder(tmp_path: Path) -> Path:
    """A folder holding ``widgets.api.json``."""
    folder = tmp_path / "input"
    folder.mkdir()
    (folder / "widgets.api.json").write_text(
        json.dumps(WIDGETS_PACKAGE, indent=2), encoding="utf-8"
    )
    return folder


@pytest.fixture
def api_model(input_folder: Path) -> ApiModel:
    """The sample package loaded into a model."""
    return build_api_model(sorted(input_folder.glob("*.api.json")))


@pytest.fixture
def configuration() -> DocConfiguration:
    """A node configuration with the page-structure kinds registered."""
    return build_custom_configuration()


@pytest.fixture
def lf_config() -> DocumenterConfig:
    """Default settings, with LF line endings for easy assertions."""
    return DocumenterConfig(newline_kind=NewlineKind.LF)


def find(model: ApiModel, canonical_reference: str) -> ApiItem:
    """Look an item up by canonical reference, failing loudly when it is missing."""
    item = model.item_by_canonical_reference(canonical_reference)
    assert item is not None, canonical_reference
    return item
