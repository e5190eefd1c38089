"""Shared pytest fixtures for kmyjournal tests."""

import gzip
import logging
from pathlib import Path

import pytest

from kmyjournal.config import ConversionSettings
from kmyjournal.output.writers import MemoryJournalWriter
from kmyjournal.source.factories import parse_document

MINIMAL_DOCUMENT = """<?xml version="1.0" encoding="utf-8"?>
<KMYMONEY-FILE>
 <ACCOUNTS>
  <ACCOUNT id="A1" name="Asset" parentaccount=""/>
  <ACCOUNT id="A2" name="Checking" parentaccount="A1"/>
 </ACCOUNTS>
 <TRANSACTIONS>
  <TRANSACTION id="T1" postdate="2024-01-31" commodity="USD">
   <SPLITS>
    <SPLIT account="A2" value="100/1" memo="Deposit"/>
   </SPLITS>
  </TRANSACTION>
 </TRANSACTIONS>
</KMYMONEY-FILE>
"""


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_xml(fixtures_dir):
    """Return the text of the sample KMyMoney document."""
    return (fixtures_dir / "sample.kmy.xml").read_text(encoding="utf-8")


@pytest.fixture
def sample_document(sample_xml):
    """Parse the sample KMyMoney document."""
    return parse_document(sample_xml)


@pytest.fixture
def minimal_document():
    """Parse a document with one account hierarchy and one transaction."""
    return parse_document(MINIMAL_DOCUMENT)


@pytest.fixture
def sample_file(tmp_path, sample_xml):
    """Write the sample document as an uncompressed file."""
    path = tmp_path / "sample.xml"
    path.write_text(sample_xml, encoding="utf-8")
    return path


@pytest.fixture
def sample_kmy(tmp_path, sample_xml):
    """Write the sample document gzip-compressed, as KMyMoney saves it."""
    path = tmp_path / "sample.kmy"
    path.write_bytes(gzip.compress(sample_xml.encode("utf-8")))
    return path


@pytest.fixture
def writer():
    """Create an in-memory journal writer."""
    return MemoryJournalWriter()


@pytest.fixture
def settings():
    """Return default conversion settings."""
    return ConversionSettings()


@pytest.fixture
def log_records():
    """Collect records emitted by the kmyjournal logger."""

    class ListHandler(logging.Handler):
        def __init__(self):
            super().__init__(level=logging.DEBUG)
            self.records = []

        def emit(self, record):
            self.records.append(record)

    logger = logging.getLogger("kmyjournal")
    handler = ListHandler()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler.records
    logger.removeHandler(handler)
    logger.setLevel(previous_level)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
