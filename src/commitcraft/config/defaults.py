"""Starter commit.toml template written by ``commitcraft init``."""

DEFAULT_TOML = """\
# commitcraft configuration
# Every section is optional; anything left out falls back to the built-in defaults.

# subject = "pre-filled commit message"

[[types]]
value = "feat"
label = "✨ A new feature"

[[types]]
value = "fix"
label = "🐛 A bug fix"

[[types]]
value = "docs"
label = "📚 Documentation only changes"

[[types]]
value = "style"
label = "💎 Changes that do not affect the meaning of the code"

[[types]]
value = "refactor"
label = "📦 A code change that neither fixes a bug nor adds a feature"

[[types]]
value = "test"
label = "🚨 Adding missing tests"

[[types]]
value = "chore"
label = "♻️ Changes to the build process or auxiliary tools"

[[scopes]]
value = "cli"
label = "Command line interface"

[[scopes]]
value = "config"
label = "Configuration handling"

[[scopes]]
value = "git"
label = "Git operations"

[[scopes]]
value = "core"
label = "Core functionality"

[[scopes]]
value = "release"
label = "New Release"

[git]
auto_add_all = true       # run `git add .` before committing
auto_push = false         # run `git push` after a successful commit
"""
