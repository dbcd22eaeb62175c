"""
Seeders package for the developer dictionary.
Static catalogs plus the routines that load them into the database.
"""

from .dictionary_seeder import dictionary_status, refresh_dictionary, seed_dictionary

__all__ = [
    'dictionary_status',
    'refresh_dictionary',
    'seed_dictionary',
]
