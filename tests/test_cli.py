"""Tests for the token CLI commands."""


def test_token_show_when_unset(runner):
    result = runner.invoke(args=['token', 'show'])

    assert result.exit_code == 0
    assert '(no token configured)' in result.output


def test_token_set_and_show(runner):
    result = runner.invoke(args=['token', 'set', 'abc123XYZ'])
    assert result.exit_code == 0
    assert 'Token saved: abc123XYZ' in result.output
    assert 'Warning' not in result.output

    result = runner.invoke(args=['token', 'show'])
    assert result.output.strip() == 'abc123XYZ'


def test_token_set_corrects_invalid_value(runner):
    result = runner.invoke(args=['token', 'set', 'abcd-1234'])

    assert result.exit_code == 0
    assert 'Warning: Incorrect value entered.' in result.output
    assert 'Token saved: abcd1234' in result.output


def test_token_clear(runner):
    runner.invoke(args=['token', 'set', 'abc123XYZ'])
    result = runner.invoke(args=['token', 'clear'])

    assert result.exit_code == 0
    assert runner.invoke(args=['token', 'show']).output.strip() == '(no token configured)'


def test_init_db(runner):
    result = runner.invoke(args=['init-db'])

    assert result.exit_code == 0
    assert 'Database initialized.' in result.output
