"""Load ``*.api.json`` files written by api-extractor into an item tree."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from api_documenter_hugo.api_item import ApiItem, Parameter
from api_documenter_hugo.api_item_kind import ALL_KINDS
from api_documenter_hugo.api_model import ApiModel
from api_documenter_hugo.custom_doc_nodes import build_custom_configuration
from api_documenter_hugo.doc_nodes import DocConfiguration
from api_documenter_hugo.errors import InputError, UnsupportedKindError
from api_documenter_hugo.excerpt import Excerpt, ExcerptToken, TokenRange
from api_documenter_hugo.release_tag import ReleaseTag
from api_documenter_hugo.tsdoc_parser import parse_doc_comment

logger = logging.getLogger(__name__)


def build_api_model(
    api_json_files: Iterable[Path],
    configuration: DocConfiguration | None = None,
) -> ApiModel:
    """Load each file as one package, then apply ``{@inheritDoc}`` references."""
    configuration = configuration or build_custom_configuration()
    model = ApiModel()
    for path in sorted(api_json_files):
        logger.info("Reading %s", path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            msg = f"Cannot read API report {path}: {e}"
            raise InputError(msg) from e
        if not isinstance(data, dict):
            msg = f"API report {path} must contain a JSON object"
            raise InputError(msg)
        model.add_member(item_from_json(data, configuration))
    apply_inherit_doc(model)
    return model


def item_from_json(data: dict[str, Any], configuration: DocConfiguration) -> ApiItem:
    """Build one item, and its members, from its JSON object."""
    kind = data.get("kind", "")
    if kind not in ALL_KINDS:
        raise UnsupportedKindError(kind, data.get("canonicalReference"))

    tokens = [ExcerptToken.from_json(t) for t in data.get("excerptTokens", [])]
    raw_comment = data.get("docComment") or ""
    item = ApiItem(
        kind=kind,
        name=data.get("name", ""),
        canonical_reference=data.get("canonicalReference", ""),
        doc_comment=(
            parse_doc_comment(raw_comment, configuration)
            if raw_comment.strip()
            else None
        ),
        excerpt_tokens=tokens,
        release_tag=ReleaseTag.parse(data.get("releaseTag")),
        is_optional=bool(data.get("isOptional", False)),
        is_static=bool(data.get("isStatic", False)),
        is_protected=bool(data.get("isProtected", False)),
        is_readonly=bool(data.get("isReadonly", False)),
        is_abstract=bool(data.get("isAbstract", False)),
        overload_index=int(data.get("overloadIndex", 0)),
        return_type_token_range=_range(data, "returnTypeTokenRange"),
        property_type_token_range=_range(data, "propertyTypeTokenRange"),
        initializer_token_range=_range(data, "initializerTokenRange"),
        type_token_range=(
            _range(data, "typeTokenRange") or _range(data, "variableTypeTokenRange")
        ),
    )

    if "extendsTokenRange" in data:
        item.extends_token_ranges.append(
            TokenRange.from_json(data["extendsTokenRange"])
        )
    item.extends_token_ranges.extend(
        TokenRange.from_json(r) for r in data.get("extendsTokenRanges", [])
    )
    item.implements_token_ranges.extend(
        TokenRange.from_json(r) for r in data.get("implementsTokenRanges", [])
    )

    for raw_parameter in data.get("parameters", []):
        item.add_parameter(
            Parameter(
                name=raw_parameter.get("parameterName", ""),
                type_excerpt=Excerpt(
                    tokens,
                    TokenRange.from_json(raw_parameter.get("parameterTypeTokenRange")),
                ),
                is_optional=bool(raw_parameter.get("isOptional", False)),
            )
        )

    for member in data.get("members", []):
        item.add_member(item_from_json(member, configuration))
    return item


def apply_inherit_doc(model: ApiModel) -> None:
    """Copy documentation into every item whose comment says ``{@inheritDoc}``."""
    done: set[int] = set()
    for package in model.packages:
        _apply_recursive(model, package, done, set())


def _apply_recursive(
    model: ApiModel,
    item: ApiItem,
    done: set[int],
    in_progress: set[int],
) -> None:
    _inherit(model, item, done, in_progress)
    for member in item.members:
        _apply_recursive(model, member, done, in_progress)


def _inherit(
    model: ApiModel,
    item: ApiItem,
    done: set[int],
    in_progress: set[int],
) -> None:
    comment = item.doc_comment
    if comment is None or comment.inherit_doc_reference is None or id(item) in done:
        return
    if id(item) in in_progress:
        logger.warning("Circular {@inheritDoc} reference at %s", item)
        return

    in_progress.add(id(item))
    reference = comment.inherit_doc_reference
    source = model.resolve_declaration_reference(reference, item) if reference else None
    if source is None or source.doc_comment is None:
        logger.warning(
            "Unresolved {@inheritDoc} reference %r in %s", reference, item
        )
    else:
        _inherit(model, source, done, in_progress)
        inherited = source.doc_comment
        comment.summary_section = inherited.summary_section
        comment.remarks_block = inherited.remarks_block
        comment.params = list(inherited.params)
        comment.type_params = list(inherited.type_params)
        comment.returns_block = inherited.returns_block
    in_progress.discard(id(item))
    done.add(id(item))


def _range(data: dict[str, Any], key: str) -> TokenRange | None:
    raw = data.get(key)
    return TokenRange.from_json(raw) if raw else None
