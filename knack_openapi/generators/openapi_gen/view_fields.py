"""Extract the field keys a view surfaces, per view type."""
from typing import Callable, Dict, Iterator, List
from knack_openapi.schemas.knack import KnackView, KnackViewType

# Pseudo-field used by search views for full-text keyword search.
KEYWORD_SEARCH_FIELD = "keyword_search"

FIELD_COLUMN_TYPE = "field"


def _table_field_keys(view: KnackView) -> Iterator[str]:
    for column in view.columns or []:
        if column.type == FIELD_COLUMN_TYPE and column.field and column.field.key:
            yield column.field.key


def _form_field_keys(view: KnackView) -> Iterator[str]:
    for group in view.groups or []:
        for column in group.columns or []:
            for form_input in column.inputs or []:
                if form_input.key:
                    yield form_input.key
                elif form_input.field and form_input.field.key:
                    yield form_input.field.key


def _details_field_keys(view: KnackView) -> Iterator[str]:
    # Shape 1: groups -> columns -> fields
    for group in view.groups or []:
        for column in group.columns or []:
            for details_field in column.fields or []:
                if details_field.key:
                    yield details_field.key

    # Shape 2: columns -> groups -> columns, each entry one field or a list of fields
    for column in view.columns or []:
        for group in column.groups or []:
            for column_data in group.columns or []:
                entries = column_data if isinstance(column_data, list) else [column_data]
                for entry in entries:
                    if entry is not None and entry.key:
                        yield entry.key


def _search_field_keys(view: KnackView) -> Iterator[str]:
    if view.results is not None:
        for column in view.results.columns or []:
            if column.type == FIELD_COLUMN_TYPE and column.field and column.field.key:
                yield column.field.key

    for group in view.groups or []:
        for column in group.columns or []:
            for search_field in column.fields or []:
                field_key = search_field.field
                if isinstance(field_key, str) and field_key and field_key != KEYWORD_SEARCH_FIELD:
                    yield field_key


VIEW_FIELD_EXTRACTORS: Dict[KnackViewType, Callable[[KnackView], Iterator[str]]] = {
    KnackViewType.TABLE: _table_field_keys,
    KnackViewType.FORM: _form_field_keys,
    KnackViewType.DETAILS: _details_field_keys,
    KnackViewType.SEARCH: _search_field_keys,
}


def extract_field_keys(view: KnackView) -> List[str]:
    """
    Return the field keys surfaced by a view, de-duplicated, in first-seen order.

    View types without a field layout (login, rich_text, unknown types) yield nothing.
    """
    try:
        view_type = KnackViewType(view.type)
    except ValueError:
        return []

    extractor = VIEW_FIELD_EXTRACTORS.get(view_type)
    if extractor is None:
        return []
    return list(dict.fromkeys(extractor(view)))
