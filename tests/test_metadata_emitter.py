"""Tests for metadata comment blocks."""

from kmyjournal.domain.entities import EntityKind, Section
from kmyjournal.domain.indexer import DocumentIndex
from kmyjournal.domain.metadata_emitter import MetadataEmitter
from kmyjournal.source.factories import parse_document


def test_fileinfo_block(sample_document, writer):
    emitter = MetadataEmitter(sample_document, writer)
    fileinfo = sample_document.find_node(sample_document.root, Section.FILEINFO)
    assert emitter.fileinfo_block(fileinfo) == (
        "; --FILEINFO--\n"
        "; CREATION_DATE: 2020-01-01\n"
        "; LAST_MODIFIED_DATE: 2024-03-05\n"
        "; VERSION: 1\n"
        ";\n"
    )


def test_user_block_includes_address(sample_document, writer):
    emitter = MetadataEmitter(sample_document, writer)
    user = sample_document.find_node(sample_document.root, Section.USER)
    assert emitter.user_block(user) == (
        "; --USER--\n"
        "; name: Jo Example\n"
        "; email: jo@example.org\n"
        "; street: 1 Main St\n"
        "; city: Springfield\n"
        "; zipcode: 12345\n"
        ";\n"
    )


def test_institution_block_expands_accounts(sample_document, writer):
    index = DocumentIndex(sample_document)
    emitter = MetadataEmitter(sample_document, writer)
    block = emitter.institution_block(index.institutions.get("I000001"), index.accounts)
    assert block == (
        "; --INSTITUTIONS--\n"
        "; id: I000001\n"
        "; name: First Bank\n"
        "; sortcode: 1234\n"
        "; street: 2 Bank Rd\n"
        "; city: Springfield\n"
        "; accountid: A000003\n"
        ";\tid: A000003\n"
        ";\tname: Checking Main\n"
        ";\tkmymoney-type: 1\n"
        ";\tparentaccount: AStd Asset\n"
        ";\tcurrency: EUR\n"
        ";\tinstitution: I000001\n"
        ";\n"
    )


def test_institution_block_without_accounts_section(sample_document, writer):
    index = DocumentIndex(sample_document)
    emitter = MetadataEmitter(sample_document, writer)
    block = emitter.institution_block(index.institutions.get("I000001"))
    assert "; accountid: A000003\n" in block
    assert ";\t" not in block


def test_institution_with_unknown_account(writer):
    doc = parse_document(
        """<KMYMONEY-FILE><INSTITUTIONS><INSTITUTION id="I1" type="bank">
        <ACCOUNTIDS><ACCOUNTID id="A404"/></ACCOUNTIDS>
        </INSTITUTION></INSTITUTIONS><ACCOUNTS/></KMYMONEY-FILE>"""
    )
    index = DocumentIndex(doc)
    emitter = MetadataEmitter(doc, writer)
    assert emitter.institution_block(index.institutions.get("I1"), index.accounts) == (
        "; --INSTITUTIONS--\n; id: I1\n; kmymoney-type: bank\n; accountid: A404\n;\n"
    )


def test_payee_block(sample_document, writer):
    index = DocumentIndex(sample_document)
    emitter = MetadataEmitter(sample_document, writer)
    assert emitter.payee_block(index.payees.get("P000001")) == (
        "; --PAYEE--\n"
        "; id: P000001\n"
        "; name: Grocery: Store\n"
        "; email: \n"
        "; street: 3 Market St\n"
        ";\n"
    )


def test_tag_and_costcenter_blocks(writer):
    doc = parse_document(
        """<KMYMONEY-FILE>
        <COSTCENTERS><COSTCENTER id="C1" name="Line one&#xa;line two"/></COSTCENTERS>
        <TAGS><TAG id="G1" name="trip"/></TAGS>
        </KMYMONEY-FILE>"""
    )
    emitter = MetadataEmitter(doc, writer)
    costcenter = doc.find_node(doc.root, Section.COSTCENTERS)
    tag = doc.find_node(doc.root, Section.TAGS)
    assert emitter.costcenter_block(costcenter) == (
        "; --COSTCENTER--\n; id: C1\n; name: Line one => line two\n;\n"
    )
    assert emitter.tag_block(tag) == "; --TAG--\n; id: G1\n; name: trip\n;\n"


def test_emit_appends(sample_document, writer):
    emitter = MetadataEmitter(sample_document, writer)
    emitter.emit("; first\n")
    emitter.emit("; second\n")
    assert writer.getvalue() == "; first\n; second\n"
