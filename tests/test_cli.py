import logging
from dataclasses import replace

from conftest import envelope, make_response
from stackbrowser.cli import run_recent, run_search, run_show
from stackbrowser.cli.render import EMPTY_SEARCH_RESULT, NO_NETWORK_DIALOG, render_detail

import main


def online():
    return True


def offline():
    return False


def test_run_search_prints_matches(mock_httpx_client, question_item, capsys):
    def side_effect(url, params=None):
        if url.endswith("/search/advanced"):
            return make_response(envelope([question_item]))
        return make_response(envelope([]))

    mock_httpx_client.get.side_effect = side_effect

    status = run_search("kotlin", session=mock_httpx_client, is_network_available=online)

    out = capsys.readouterr().out
    assert status == 0
    assert "How to parse JSON in Kotlin?" in out
    assert "tags: kotlin, json" in out


def test_run_search_blank_query_makes_no_search(mock_httpx_client, capsys):
    status = run_search("  ", session=mock_httpx_client, is_network_available=online)

    assert status == 2
    urls = [call.args[0] for call in mock_httpx_client.get.call_args_list]
    assert not any(url.endswith("/search/advanced") for url in urls)


def test_run_recent_empty_result(mock_httpx_client, capsys):
    status = run_recent(session=mock_httpx_client, is_network_available=online)

    assert status == 0
    assert EMPTY_SEARCH_RESULT in capsys.readouterr().out


def test_run_recent_offline_shows_dialog(mock_httpx_client, capsys):
    status = run_recent(session=mock_httpx_client, is_network_available=offline)

    assert status == 1
    assert NO_NETWORK_DIALOG in capsys.readouterr().out
    mock_httpx_client.get.assert_not_called()


def test_run_show_prints_sorted_answers(mock_httpx_client, question_item, answer_item, capsys):
    low = dict(
        answer_item, answer_id=20, score=1, is_accepted=False, body="<p>low-score answer</p>"
    )

    def side_effect(url, params=None):
        if url.endswith("/answers"):
            return make_response(envelope([low, answer_item]))
        return make_response(envelope([question_item]))

    mock_httpx_client.get.side_effect = side_effect

    status = run_show(1, "Votes", session=mock_httpx_client, is_network_available=online)

    out = capsys.readouterr().out
    assert status == 0
    assert "# How to parse JSON in Kotlin?" in out
    assert "## 2 Answers (sorted by Votes)" in out
    assert out.index("kotlinx.serialization") < out.index("low-score answer")


def test_run_show_reports_http_error(mock_httpx_client, capsys):
    mock_httpx_client.get.return_value = make_response(
        is_success=False, reason_phrase="Bad Request", status_code=400
    )

    status = run_show(1, session=mock_httpx_client, is_network_available=online)

    assert status == 1
    assert "Error: Failed to load" in capsys.readouterr().out


def test_render_detail_marks_accepted_answer(sample_question, sample_answers):
    question = replace(sample_question, accepted_answer_id=11)

    text = render_detail(question, sample_answers, "Oldest")

    first_answer = text.split("## 3 Answers (sorted by Oldest)")[1]
    assert first_answer.strip().startswith("▲ 12  ✔ accepted")


def test_parse_args_show():
    args = main.parse_args(["--skip-connectivity-check", "show", "42", "--sort", "Active"])

    assert args.command == "show"
    assert args.question_id == 42
    assert args.sort == "Active"
    assert args.skip_connectivity_check is True


def test_owned_http_client_is_closed(monkeypatch, mock_httpx_client, capsys):
    monkeypatch.setattr("stackbrowser.cli.search.httpx.Client", lambda **kwargs: mock_httpx_client)

    status = run_recent(is_network_available=online)

    assert status == 0
    mock_httpx_client.close.assert_called_once_with()


def test_injected_http_client_is_left_open(mock_httpx_client, capsys):
    run_show(1, session=mock_httpx_client, is_network_available=online)

    mock_httpx_client.close.assert_not_called()


def test_run_search_prints_search_not_recent(mock_httpx_client, question_item, capsys):
    recent_item = dict(question_item, question_id=77, title="Recent only")

    def side_effect(url, params=None):
        if url.endswith("/search/advanced"):
            return make_response(envelope([question_item]))
        return make_response(envelope([recent_item]))

    mock_httpx_client.get.side_effect = side_effect

    run_search("kotlin", session=mock_httpx_client, is_network_available=online)

    out = capsys.readouterr().out
    assert "How to parse JSON in Kotlin?" in out
    assert "Recent only" not in out


def test_configure_logging_matches_verbosity():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    httpx_level = logging.getLogger("httpx").level
    try:
        main.configure_logging(verbose=False)
        assert root.level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING

        main.configure_logging(verbose=True)
        assert root.level == logging.DEBUG
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("httpx").setLevel(httpx_level)
