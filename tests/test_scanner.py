"""
Tests for content-model detection.
"""

import io

import pytest

from conftest import MODEL_XML, UNRELATED_XML, patch_central_header
from modeljar.archive.scanner import find_model_entries, is_model_document
from modeljar.archive.source_archive import SourceArchive
from modeljar.exceptions import NoModelsFoundError


def test_is_model_document_needs_both_markers():
    assert is_model_document(io.BytesIO(b'<model name="x"/>'))
    assert is_model_document(io.BytesIO(b'name="x" appears before <model'))
    assert not is_model_document(io.BytesIO(b"<model/>"))
    assert not is_model_document(io.BytesIO(b'<bean name="x"/>'))


def test_is_model_document_only_reads_the_sniff_window():
    late = b" " * 4096 + b'<model name="late"/>'
    assert not is_model_document(io.BytesIO(late))
    assert is_model_document(io.BytesIO(late), sniff_bytes=len(late))


def test_scanner_returns_only_models(make_zip):
    path = make_zip("addon.jar", {
        "config/model/types.xml": MODEL_XML,
        "config/context/webscripts.xml": UNRELATED_XML,
    })
    with SourceArchive(str(path)) as archive:
        matches = find_model_entries(archive)

    assert [m.source_path for m in matches] == ["config/model/types.xml"]
    assert matches[0].content == MODEL_XML
    assert matches[0].base_name == "types.xml"


def test_scanner_extension_is_case_insensitive(make_zip):
    path = make_zip("addon.jar", {
        "model/Upper.XML": MODEL_XML,
        "model/types.xml.bak": MODEL_XML,
        "model/types.txt": MODEL_XML,
    })
    with SourceArchive(str(path)) as archive:
        matches = find_model_entries(archive)

    assert [m.source_path for m in matches] == ["model/Upper.XML"]


def test_scanner_keeps_enumeration_order(make_zip):
    path = make_zip("addon.jar", {
        "z/zeta.xml": MODEL_XML,
        "a/alpha.xml": MODEL_XML,
        "m/mid.xml": MODEL_XML,
    })
    with SourceArchive(str(path)) as archive:
        matches = find_model_entries(archive)

    assert [m.source_path for m in matches] == ["z/zeta.xml", "a/alpha.xml", "m/mid.xml"]


def test_scanner_keeps_duplicate_base_names(make_zip):
    path = make_zip("addon.jar", {
        "one/types.xml": MODEL_XML,
        "two/types.xml": MODEL_XML.replace(b"ACME", b"Other"),
    })
    with SourceArchive(str(path)) as archive:
        matches = find_model_entries(archive)

    assert [m.source_path for m in matches] == ["one/types.xml", "two/types.xml"]


def test_scanner_skips_unreadable_entries(make_zip):
    path = make_zip("addon.jar", {
        "model/broken.xml": MODEL_XML,
        "model/types.xml": MODEL_XML,
    })
    with SourceArchive(str(path)) as archive:
        def broken():
            raise OSError("bad CRC")

        archive.get("model/broken.xml")._opener = broken
        matches = find_model_entries(archive)

    assert [m.source_path for m in matches] == ["model/types.xml"]


def test_scanner_without_models_is_fatal(make_zip):
    path = make_zip("addon.jar", {
        "config/context/webscripts.xml": UNRELATED_XML,
        "readme.txt": b"<model name=",
    })
    with SourceArchive(str(path)) as archive:
        with pytest.raises(NoModelsFoundError):
            find_model_entries(archive)


def test_scanner_skips_encrypted_entries(make_zip):
    path = make_zip("addon.jar", {
        "m/locked.xml": MODEL_XML,
        "m/types.xml": MODEL_XML,
    })
    patch_central_header(path, "m/locked.xml", flag_bits=0x1)

    with SourceArchive(str(path)) as archive:
        matches = find_model_entries(archive)

    assert [m.source_path for m in matches] == ["m/types.xml"]


def test_scanner_skips_unsupported_compression(make_zip):
    path = make_zip("addon.jar", {
        "m/odd.xml": MODEL_XML,
        "m/types.xml": MODEL_XML,
    })
    patch_central_header(path, "m/odd.xml", method=99)

    with SourceArchive(str(path)) as archive:
        matches = find_model_entries(archive)

    assert [m.source_path for m in matches] == ["m/types.xml"]
