import logging

from diccionario.config import DEFAULT_SEED_BATCH_SIZE, EnvReader, _normalize_db_url
from diccionario.logging_config import PiiRedactionFilter, redact


def test_env_reader_parses_typed_values():
    reader = EnvReader({
        'SEED_BATCH_SIZE': ' 50 ',
        'DICTIONARY_AUTO_SEED': 'yes',
        'SEED_CHILDREN_POLICY': 'REPLACE',
    })

    assert reader.positive_int('SEED_BATCH_SIZE', DEFAULT_SEED_BATCH_SIZE) == 50
    assert reader.bool('DICTIONARY_AUTO_SEED') is True
    assert reader.choice('SEED_CHILDREN_POLICY', ('preserve', 'replace'), 'preserve') == 'replace'
    assert reader.warnings == []


def test_env_reader_falls_back_with_warnings():
    reader = EnvReader({
        'SEED_BATCH_SIZE': '-3',
        'SEED_TIME_BUDGET_MS': 'soon',
        'DICTIONARY_AUTO_SEED': 'maybe',
        'SEED_CHILDREN_POLICY': 'merge',
    })

    assert reader.positive_int('SEED_BATCH_SIZE', 200) == 200
    assert reader.positive_int('SEED_TIME_BUDGET_MS', 7000) == 7000
    assert reader.bool('DICTIONARY_AUTO_SEED', False) is False
    assert reader.choice('SEED_CHILDREN_POLICY', ('preserve', 'replace'), 'preserve') == 'preserve'
    assert len(reader.warnings) == 4


def test_env_reader_treats_blank_as_unset():
    reader = EnvReader({'ADMIN_TOKEN': '   '})
    assert reader.str('ADMIN_TOKEN') is None
    assert reader.str('ADMIN_TOKEN', 'fallback') == 'fallback'


def test_postgres_scheme_is_normalized():
    assert _normalize_db_url('postgres://u:p@host/db') == 'postgresql://u:p@host/db'
    assert _normalize_db_url('sqlite:///x.db') == 'sqlite:///x.db'
    assert _normalize_db_url('') is None


def test_redact_scrubs_tokens_and_credentials():
    message = redact('auth Bearer abc.def token=xyz for ops@example.com on postgresql://app:hunter2@db/main')

    assert 'abc.def' not in message
    assert 'xyz' not in message
    assert 'ops@example.com' not in message
    assert 'hunter2' not in message


def test_redaction_filter_renders_args_before_scrubbing():
    record = logging.LogRecord('diccionario', logging.INFO, __file__, 1, 'token=%s', ('s3cret',), None)

    assert PiiRedactionFilter().filter(record) is True
    assert record.getMessage() == 'token=[REDACTED]'
