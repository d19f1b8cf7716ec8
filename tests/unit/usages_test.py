"""Unit tests for the field usage-site locator."""

from codex_lsp.core.syntax import parse_document
from codex_lsp.core.usages import locate_usage_sites
from codex_lsp.models import Position


class TestUsageCoverage:
    def test_finds_each_call_with_arguments(self, client_source: str) -> None:
        sites = locate_usage_sites(parse_document(client_source), "_logger")
        assert [site.method for site in sites] == ["Info", "Warn", "Error"]
        assert [site.argument for site in sites] == ['"starting"', '"attempt"', 'new Exception("boom")']

    def test_captures_first_argument_span(self, client_source: str) -> None:
        sites = locate_usage_sites(parse_document(client_source), "_logger")
        assert sites[0].start_point == Position(row=15, column=25)
        assert sites[0].end_point == Position(row=15, column=35)
        assert sites[2].start_point == Position(row=17, column=26)
        assert sites[2].end_point == Position(row=17, column=47)

    def test_byte_offsets_cover_argument_text(self, client_source: str) -> None:
        source_bytes = client_source.encode("utf-8")
        for site in locate_usage_sites(parse_document(client_source), "_logger"):
            assert source_bytes[site.start_byte : site.end_byte].decode("utf-8") == site.argument

    def test_three_logger_calls(self) -> None:
        source = """
class Job
{
    public Job(ITelemetryLogger<Job> logger) { this.logger = logger; }

    public void Run()
    {
        logger.Trace(1);
        logger.Trace(2, 3);
        if (logger.Enabled("x")) { }
    }
}
"""
        sites = locate_usage_sites(parse_document(source), "logger")
        assert len(sites) == 3
        assert [site.argument for site in sites] == ["1", "2", '"x"']


class TestUsageFiltering:
    def test_calls_without_arguments_are_skipped(self) -> None:
        source = "class A { void M() { _log.Flush(); } }"
        assert locate_usage_sites(parse_document(source), "_log") == []

    def test_other_receivers_are_skipped(self) -> None:
        source = "class A { void M() { Console.WriteLine(1); other.Send(2); } }"
        assert locate_usage_sites(parse_document(source), "_log") == []

    def test_receiver_must_match_exactly(self) -> None:
        source = "class A { void M() { _logger2.Send(1); } }"
        assert locate_usage_sites(parse_document(source), "_logger") == []

    def test_zero_usages(self) -> None:
        source = "class A { void M() { } }"
        assert locate_usage_sites(parse_document(source), "_log") == []

    def test_identifier_with_quotes_yields_no_matches(self, client_source: str) -> None:
        assert locate_usage_sites(parse_document(client_source), '_logger" ) (#eq? @usage.method "Info') == []
