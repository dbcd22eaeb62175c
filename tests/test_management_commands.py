from diccionario.models import Term
from diccionario.seeders.catalogs import expected_term_keys


def test_seed_dictionary_command_seeds_everything(app, runner):
    result = runner.invoke(args=['seed-dictionary'])

    assert result.exit_code == 0, result.output
    assert '✅ Processed' in result.output
    with app.app_context():
        assert Term.query.count() == len(expected_term_keys())


def test_seed_dictionary_resumes_in_small_batches(app, runner):
    first = runner.invoke(args=['seed-dictionary', '--batch-size', '5'])

    assert first.exit_code == 0, first.output
    assert 'Stopped at the batch size limit' in first.output
    assert 'run the command again to resume' in first.output
    with app.app_context():
        assert Term.query.count() == 5

    rest = runner.invoke(args=['seed-dictionary', '--batch-size', '5', '--until-complete'])

    assert rest.exit_code == 0, rest.output
    with app.app_context():
        assert Term.query.count() == len(expected_term_keys())


def test_seed_dictionary_skips_when_already_seeded(runner):
    runner.invoke(args=['seed-dictionary'])

    result = runner.invoke(args=['seed-dictionary'])

    assert result.exit_code == 0
    assert 'already seeded' in result.output


def test_seed_dictionary_rejects_non_positive_batch_size(runner):
    result = runner.invoke(args=['seed-dictionary', '--batch-size', '0'])

    assert result.exit_code != 0
    assert 'must be a positive integer' in result.output


def test_refresh_rewrites_existing_terms(app, runner):
    runner.invoke(args=['seed-dictionary'])
    with app.app_context():
        term = Term.query.filter_by(term='fetch').first()
        term.translation = 'editado a mano'
        from diccionario.extensions import db
        db.session.commit()

    result = runner.invoke(args=['seed-dictionary', '--refresh', '--until-complete'])

    assert result.exit_code == 0, result.output
    with app.app_context():
        assert Term.query.filter_by(term='fetch').first().translation == 'traer datos del servidor'
        assert Term.query.count() == len(expected_term_keys())


def test_dictionary_status_command(runner):
    before = runner.invoke(args=['dictionary-status'])
    runner.invoke(args=['seed-dictionary'])
    after = runner.invoke(args=['dictionary-status'])

    assert before.exit_code == 0
    assert 'Missing terms' in before.output
    assert 'Dictionary fully seeded' in after.output
