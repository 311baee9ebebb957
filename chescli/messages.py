"""
Built-in message table.

Every internal message identifier maps to one template per language. The table is
plain data: supporting a new language or message means adding rows here, never
branches in code. Language packs loaded from disk are layered on top of these
templates (see Langpack.builtin / Langpack.load(base=...)).

Identifiers follow the '<domain>.<category>.<code>' scheme used by fault titles
('cmd.err.1943', 'file.err.8531') and '<domain>.<name>' for description labels
('cmd.option_name').
"""
from types import MappingProxyType

DEFAULT_LANGUAGE = "en"

_MESSAGES = {
    # command faults (titles)
    "cmd.err.1943": {
        "en": "duplicated option name",
        "ja": "オプション名が重複しています",
    },
    "cmd.err.3485": {
        "en": "no matching subcommand name",
        "ja": "一致するサブコマンド名がありません",
    },
    "cmd.err.7095": {
        "en": "invalid log limit",
        "ja": "ログ制限の値が不正です",
    },
    "cmd.err.9534": {
        "en": "option value before option name",
        "ja": "オプション名の前にオプション値があります",
    },
    # command notices
    "cmd.note.5720": {
        "en": "details",
        "ja": "詳細",
    },
    # command description labels
    "cmd.option_name": {
        "en": "option name",
        "ja": "オプション名",
    },
    "cmd.option_value": {
        "en": "option value",
        "ja": "オプション値",
    },
    "cmd.subcmd_name": {
        "en": "subcommand name",
        "ja": "サブコマンド名",
    },
    # console
    "console.note.4768": {
        "en": "log limit exceeded",
        "ja": "ログ制限を超過しました",
    },
    "console.log_limit": {
        "en": "log limit",
        "ja": "ログ制限",
    },
    "console.spec_link": {
        "en": "specification",
        "ja": "仕様",
    },
    # file faults (titles)
    "file.err.0077": {
        "en": "expected directory path not file path",
        "ja": "ファイルパスでなくディレクトリパスが必要です",
    },
    "file.err.0117": {
        "en": "failed to open file",
        "ja": "ファイルのオープンに失敗しました",
    },
    "file.err.2160": {
        "en": "expected file path not directory path",
        "ja": "ディレクトリパスでなくファイルパスが必要です",
    },
    "file.err.2711": {
        "en": "invalid path",
        "ja": "パスが不正です",
    },
    "file.err.3995": {
        "en": "failed to read file",
        "ja": "ファイルの読み込みに失敗しました",
    },
    "file.err.8531": {
        "en": "path does not exist",
        "ja": "パスが存在しません",
    },
    "file.err.9798": {
        "en": "failed to get environment variable",
        "ja": "環境変数の取得に失敗しました",
    },
    # file description labels
    "file.env_var_name": {
        "en": "environment variable",
        "ja": "環境変数",
    },
    "file.path": {
        "en": "path",
        "ja": "パス",
    },
}

MESSAGES = MappingProxyType({key: MappingProxyType(value) for key, value in _MESSAGES.items()})

LANGUAGES = frozenset(language for templates in MESSAGES.values() for language in templates)


def lookup(language=DEFAULT_LANGUAGE, /):
    """
    key → template mapping of every built-in message for one language.

    messages without a template in `language` fall back to DEFAULT_LANGUAGE.
    raises ValueError for a language that no message knows.
    """
    if language not in LANGUAGES:
        raise ValueError("unsupported language %r (expected one of %s)" % (language, ", ".join(sorted(LANGUAGES))))
    return MappingProxyType({
        key: templates.get(language, templates[DEFAULT_LANGUAGE])
        for key, templates in MESSAGES.items()
    })


__all__ = (
    "DEFAULT_LANGUAGE",
    "MESSAGES",
    "LANGUAGES",
    "lookup",
)
