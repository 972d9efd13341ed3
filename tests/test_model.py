import dataclasses

import pytest

from pyinix import InixDocument, InixHeader, InixParser, InixProperty, LineKind


def test_lookup_wraps_bare_header_names(custom_doc) -> None:
    assert custom_doc['FRUITS'] is custom_doc['[FRUITS]']
    assert custom_doc[' FRUITS '] is custom_doc['[FRUITS]']
    assert 'FRUITS' in custom_doc
    assert custom_doc.contains_header('[GAMES]')
    assert not custom_doc.contains_header('VEGETABLES')


def test_lookup_of_missing_key_raises(custom_doc) -> None:
    with pytest.raises(KeyError):
        custom_doc['VEGETABLES']
    with pytest.raises(KeyError):
        custom_doc['FRUITS']['MANGO']


@pytest.mark.parametrize('number', [0, 5, -1])
def test_get_comment_out_of_range_raises(custom_doc, number: int) -> None:
    with pytest.raises(KeyError):
        custom_doc.get_comment(number)


def test_comment_keys_are_not_wrapped(custom_doc) -> None:
    assert custom_doc['Comment-3'] is custom_doc.get_comment(3)
    assert 'Comment-3' in custom_doc
    # ... while header membership always wraps.
    assert not custom_doc.contains_header('Comment-3')


def test_header_named_like_a_comment_key_does_not_collide() -> None:
    doc = InixParser().parse(['; c', '[Comment-1]', 'x=1'])

    assert len(doc) == 2
    assert doc.get_comment(1).text == '; c'
    assert doc.contains_header('Comment-1')
    assert doc['[Comment-1]']['x'].value == '1'


def test_bare_header_name_starting_like_a_comment_key() -> None:
    doc = InixParser().parse(['[Comment-Rules]', 'x=1', '; c'])

    assert doc.contains_header('Comment-Rules')
    assert 'Comment-Rules' in doc
    assert doc['Comment-Rules'] is doc['[Comment-Rules]']
    assert doc['Comment-Rules']['x'].value == '1'
    assert doc['Comment-1'] is doc.get_comment(1)


def test_node_kinds(custom_doc) -> None:
    assert custom_doc['FRUITS'].kind is LineKind.HEADER
    assert custom_doc.get_comment(1).kind is LineKind.COMMENT


def test_property_is_immutable() -> None:
    prop = InixProperty('Call of Duty', 'This is call of duty.')

    with pytest.raises(dataclasses.FrozenInstanceError):
        prop.value = 'Battlefield'  # type: ignore[misc]


def test_header_keeps_insertion_order() -> None:
    header = InixHeader('note')
    header['b'] = InixProperty('1')
    header['a'] = InixProperty('2')
    header['b'] = InixProperty('3')

    assert list(header) == ['b', 'a']
    assert header.properties == {'b': InixProperty('3'), 'a': InixProperty('2')}
    del header['b']
    assert list(header) == ['a']


def test_empty_document() -> None:
    doc = InixDocument()

    assert doc.object_count() == 0
    assert doc.has_errors is False
    assert list(doc.headers()) == []


def test_dump_dictionary(custom_doc, recorder) -> None:
    custom_doc.dump_dictionary(recorder)

    assert recorder.messages == [
        'Comment-1 -> Comment',
        '[FRUITS] -> Header',
        'Comment-2 -> Comment',
        'Comment-3 -> Comment',
        '[GAMES] -> Header',
        'Comment-4 -> Comment',
    ]
