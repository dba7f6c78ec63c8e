import json

import sitemap_crawler.engine as engine_module
from sitemap_crawler import cli
from sitemap_crawler.errors import UnreachableError


def unreachable(session, url, timeout_s):
    raise UnreachableError(url, "connection error")


def test_cli_prints_result_and_writes_sitemap(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(engine_module, "probe_content_type", unreachable)
    sitemap_path = tmp_path / "sitemap.xml"

    exit_code = cli.main(["http://example.com", "--sitemap", str(sitemap_path)])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {"urls": 1, "sitemap": 1}
    assert b"<loc>http://example.com/</loc>" in sitemap_path.read_bytes()


def test_cli_no_sitemap(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(engine_module, "probe_content_type", unreachable)
    monkeypatch.chdir(tmp_path)

    exit_code = cli.main(["http://example.com/", "--no-sitemap"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {"urls": 1}
    assert not (tmp_path / "sitemap.xml").exists()


def test_cli_verbose_prints_summary(monkeypatch, capsys):
    monkeypatch.setattr(engine_module, "probe_content_type", unreachable)

    cli.main(["http://example.com/", "--no-sitemap", "--verbose"])

    err = capsys.readouterr().err
    assert "CRAWL SUMMARY" in err
    assert "Unreachable: 1" in err
    assert "HTML pages:             0" in err


def test_cli_rejects_malformed_url(capsys):
    exit_code = cli.main(["example.com"])

    assert exit_code == 2
    assert "complete url required" in capsys.readouterr().err


def test_parser_defaults():
    args = cli.build_parser().parse_args(["http://example.com/"])

    assert args.sitemap == "sitemap.xml"
    assert args.no_sitemap is False
    assert args.relative_to_page is False
