import yaml
from pathlib import Path
from flask import request, g, current_app, has_request_context

LANGUAGES = ['en', 'fr']
DEFAULT_LANGUAGE = 'en'
TRANSLATIONS_DIR = Path(__file__).resolve().parent.parent / 'translations'

# Cache for translations
_translations_cache = {}
_translation_file_times = {}


def load_translations():
    """Load translations from YAML files with hot-reloading in debug mode"""
    global _translations_cache

    # In production, use cached translations
    if not current_app.debug and _translations_cache:
        return _translations_cache

    # Check if any translation files have been modified
    reload_needed = False
    for lang in LANGUAGES:
        file_path = TRANSLATIONS_DIR / f'{lang}.yaml'
        try:
            current_mtime = file_path.stat().st_mtime
        except FileNotFoundError:
            continue
        if _translation_file_times.get(file_path) != current_mtime:
            _translation_file_times[file_path] = current_mtime
            reload_needed = True

    # Reload translations if files changed or cache is empty
    if reload_needed or not _translations_cache:
        print("[Translations] Reloading language files...")
        translations = {}
        for lang in LANGUAGES:
            try:
                with open(TRANSLATIONS_DIR / f'{lang}.yaml', 'r', encoding='utf-8') as f:
                    translations[lang] = yaml.safe_load(f) or {}
            except FileNotFoundError:
                print(f"Warning: Translation file translations/{lang}.yaml not found")
                translations[lang] = {}
        _translations_cache = translations

    return _translations_cache


def get_language():
    """Detect language from Accept-Language header"""
    if not has_request_context():
        return DEFAULT_LANGUAGE

    if hasattr(g, 'language'):
        return g.language

    best = request.accept_languages.best_match(LANGUAGES, default=DEFAULT_LANGUAGE)
    g.language = best
    return g.language


def t(key, *args, **kwargs):
    """Translate key to current language"""
    lang = get_language()
    translations = load_translations()
    translation = translations.get(lang, {}).get(key, translations.get(DEFAULT_LANGUAGE, {}).get(key, key))

    # Handle string formatting
    if args or kwargs:
        try:
            if kwargs:
                return translation.format(**kwargs)
            return translation.format(*args)
        except (IndexError, KeyError, ValueError) as e:
            print(f"Warning: Translation formatting error for key '{key}': {e}")
            return translation

    return translation
