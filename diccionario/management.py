"""
Management commands for seeding and inspecting the dictionary
"""
import click
from flask.cli import with_appcontext

from .extensions import db
from .seeders import dictionary_status, refresh_dictionary, seed_dictionary


def _positive(ctx, param, value):
    if value is not None and value <= 0:
        raise click.BadParameter('must be a positive integer')
    return value


def _print_result(result):
    if result is None:
        print("ℹ️  Dictionary already seeded; nothing to do (use --force to re-check).")
        return
    print(
        f"✅ Processed {result.processed} terms, {result.remaining} remaining "
        f"of {result.total_missing} pending"
    )
    if result.batch_limit_reached:
        print("ℹ️  Stopped at the batch size limit.")
    if result.time_budget_reached:
        print("ℹ️  Stopped at the time budget.")
    if result.failed_stats:
        print(f"⚠️  Stats rows not ensured for: {', '.join(result.failed_stats)}")


@click.command('seed-dictionary')
@click.option('--force', is_flag=True, help='Run a batch even if the term count already matches the catalog')
@click.option('--batch-size', type=int, default=None, callback=_positive, help='Maximum terms per batch')
@click.option('--time-budget-ms', type=int, default=None, callback=_positive, help='Wall-clock budget per batch')
@click.option('--until-complete', is_flag=True, help='Keep running batches until every term is stored')
@click.option('--refresh', is_flag=True, help='Rewrite scalar fields of terms that already exist')
@with_appcontext
def seed_dictionary_command(force, batch_size, time_budget_ms, until_complete, refresh):
    """Seed the dictionary from the static catalogs"""
    try:
        print("🔧 Seeding dictionary terms...")
        if refresh:
            results = refresh_dictionary(batch_size, time_budget_ms, until_complete)
        else:
            results = seed_dictionary(force, batch_size, time_budget_ms, until_complete)

        for result in results:
            _print_result(result)

        final = results[-1]
        if final is not None and not final.completed:
            print(f"ℹ️  {final.remaining} terms still pending; run the command again to resume.")
    except Exception as e:
        print(f'❌ Dictionary seeding failed: {str(e)}')
        db.session.rollback()
        raise


@click.command('dictionary-status')
@with_appcontext
def dictionary_status_command():
    """Show how much of the catalog is stored"""
    try:
        status = dictionary_status()
        print(f"ℹ️  Expected terms: {status['expected']}")
        print(f"ℹ️  Stored terms:   {status['current']}")
        if status['missing']:
            print(f"⚠️  Missing terms:  {status['missing']}")
        else:
            print("✅ Dictionary fully seeded")
    except Exception as e:
        print(f'❌ Status check failed: {str(e)}')
        raise


def register_commands(app):
    """Register CLI commands"""
    app.cli.add_command(seed_dictionary_command)
    app.cli.add_command(dictionary_status_command)
