"""
Cross-match preference storage.
"""

from .preferences import PreferenceStore, InMemoryPreferenceStore, JsonPreferenceStore

__all__ = ['PreferenceStore', 'InMemoryPreferenceStore', 'JsonPreferenceStore']
