from watchface.notifications import (
    NOTIFICATION_LIMIT,
    Notification,
    count_lines,
    format_notification,
    parse_notifications,
)


def test_single_notification():
    assert parse_notifications("Mail,Hello;extra\n") == [Notification("Mail", "Hello")]


def test_several_notifications_in_order():
    result = parse_notifications("Mail,Hello;x\nChat,Hi there;y\n")
    assert result == [Notification("Mail", "Hello"), Notification("Chat", "Hi there")]


def test_source_is_trimmed():
    result = parse_notifications("  Mail ,Hello;x\n")
    assert result[0].source == "Mail"


def test_semicolon_ending_line_gives_empty_message():
    assert parse_notifications("Mail,Hello;\n") == [Notification("Mail", "")]


def test_line_without_semicolon_keeps_previous_message():
    result = parse_notifications("A,one;x\nB,two\n")
    assert result == [Notification("A", "one"), Notification("B", "one")]


def test_unterminated_line_is_not_returned():
    result = parse_notifications("A,one;x\nB,two;y")
    assert result == [Notification("A", "one")]


def test_empty_input():
    assert parse_notifications("") == []


def test_at_most_limit_notifications():
    data = "".join(f"App{n},Message{n};x\n" for n in range(NOTIFICATION_LIMIT + 3))
    result = parse_notifications(data)
    assert len(result) == NOTIFICATION_LIMIT
    assert result[0] == Notification("App0", "Message0")


def test_count_lines_matches_parsed_entries():
    data = "A,one;x\nB,two;y\nC,three;z\n"
    assert count_lines(data) == len(parse_notifications(data))


def test_count_lines_of_empty_text():
    assert count_lines("") == 0


def test_format_notification():
    assert format_notification(Notification("Mail", "Hello")) == "Mail: Hello"


def test_format_notification_trims():
    assert format_notification(Notification("Mail", "")) == "Mail:"