"""
Lookup tables for commit message synthesis.

This module holds the closed vocabulary of commit types together with
their gitmoji markers and human readable descriptions, the list of
common scopes recognised during scope inference, and the priority order
used to pick a single type out of several inferred ones. All tables are
read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple


GITMOJIS: Mapping[str, str] = MappingProxyType({
    "feat": "✨",
    "fix": "🐛",
    "docs": "📝",
    "style": "💄",
    "refactor": "♻️",
    "perf": "⚡",
    "test": "✅",
    "build": "📦",
    "ci": "👷",
    "chore": "🧹",
    "revert": "⏪",
    "init": "🎉",
    "wip": "🚧",
    "security": "🔒",
    "config": "🔧",
    "deps": "➕",
    "remove": "➖",
    "update": "⬆️",
    "downgrade": "⬇️",
    "branch": "🌿",
    "merge": "🔀",
    "tag": "🏷️",
    "release": "🚀",
    "deploy": "🎯",
    "locale": "🌐",
    "accessibility": "♿",
    "design": "🎨",
    "content": "✏️",
    "translation": "🌐",
    "email": "📧",
    "analytics": "📊",
    "seo": "🔍",
    "performance": "⚡",
    "hotfix": "🚑",
    "breaking": "💥",
    "license": "⚖️",
    "ignore": "🙈",
    "workflow": "📋",
    "infrastructure": "🏗️",
    "database": "🗄️",
    "api": "🔌",
    "ui": "🖼️",
    "ux": "🎯",
    "mobile": "📱",
    "desktop": "💻",
    "server": "🖥️",
    "cloud": "☁️",
    "monitoring": "📈",
    "logging": "📋",
    "caching": "💾",
    "validation": "✅",
    "formatting": "💄",
    "linting": "🚨",
    "types": "🏷️",
    "comments": "💬",
    "documentation": "📚",
    "examples": "📖",
    "templates": "📄",
    "scaffolding": "🏗️",
    "migration": "🔄",
    "backup": "💾",
    "restore": "📦",
    "export": "📤",
    "import": "📥",
    "download": "⬇️",
    "upload": "⬆️",
    "install": "📥",
    "uninstall": "📤",
    "upgrade": "⬆️",
    "patch": "🩹",
    "experimental": "🧪",
    "deprecated": "⚠️",
    "removed": "🗑️",
    "added": "➕",
    "changed": "🔄",
    "fixed": "🐛",
    "improved": "⚡",
    "optimized": "⚡",
    "simplified": "🧹",
    "refactored": "♻️",
    "reorganized": "📦",
    "renamed": "🏷️",
    "moved": "📦",
    "copied": "📋",
    "deleted": "🗑️",
    "created": "✨",
    "updated": "⬆️",
    "modified": "🔄",
    "replaced": "🔄",
    "merged": "🔀",
    "split": "✂️",
    "extracted": "📦",
    "inlined": "📦",
    "extracted_to_file": "📦",
    "inlined_from_file": "📦",
    "extracted_to_module": "📦",
    "inlined_from_module": "📦",
    "extracted_to_function": "📦",
    "inlined_from_function": "📦",
})


COMMIT_TYPES: Mapping[str, str] = MappingProxyType({
    "feat": "A new feature",
    "fix": "A bug fix",
    "docs": "Documentation only changes",
    "style": "Changes that do not affect the meaning of the code",
    "refactor": "A code change that neither fixes a bug nor adds a feature",
    "perf": "A code change that improves performance",
    "test": "Adding missing tests or correcting existing tests",
    "build": "Changes that affect the build system or external dependencies",
    "ci": "Changes to CI configuration files and scripts",
    "chore": "Other changes that don't modify src or test files",
    "revert": "Reverts a previous commit",
    "init": "Initial commit",
    "wip": "Work in progress",
    "security": "Security fixes",
    "config": "Configuration changes",
    "deps": "Adding dependencies",
    "remove": "Removing dependencies",
    "update": "Updating dependencies",
    "downgrade": "Downgrading dependencies",
    "branch": "Branch operations",
    "merge": "Merge operations",
    "tag": "Tag operations",
    "release": "Release operations",
    "deploy": "Deployment operations",
    "locale": "Localization changes",
    "accessibility": "Accessibility improvements",
    "design": "Design changes",
    "content": "Content changes",
    "translation": "Translation changes",
    "email": "Email changes",
    "analytics": "Analytics changes",
    "seo": "SEO changes",
    "performance": "Performance improvements",
    "hotfix": "Hotfix",
    "breaking": "Breaking changes",
    "license": "License changes",
    "ignore": "Ignore changes",
    "workflow": "Workflow changes",
    "infrastructure": "Infrastructure changes",
    "database": "Database changes",
    "api": "API changes",
    "ui": "UI changes",
    "ux": "UX changes",
    "mobile": "Mobile changes",
    "desktop": "Desktop changes",
    "server": "Server changes",
    "cloud": "Cloud changes",
    "monitoring": "Monitoring changes",
    "logging": "Logging changes",
    "caching": "Caching changes",
    "validation": "Validation changes",
    "formatting": "Formatting changes",
    "linting": "Linting changes",
    "types": "Type changes",
    "comments": "Comment changes",
    "documentation": "Documentation changes",
    "examples": "Example changes",
    "templates": "Template changes",
    "scaffolding": "Scaffolding changes",
    "migration": "Migration changes",
    "backup": "Backup changes",
    "restore": "Restore changes",
    "export": "Export changes",
    "import": "Import changes",
    "download": "Download changes",
    "upload": "Upload changes",
    "install": "Installation changes",
    "uninstall": "Uninstallation changes",
    "upgrade": "Upgrade changes",
    "patch": "Patch changes",
    "experimental": "Experimental changes",
    "deprecated": "Deprecation changes",
    "removed": "Removal changes",
    "added": "Added changes",
    "changed": "Changed changes",
    "fixed": "Fixed changes",
    "improved": "Improved changes",
    "optimized": "Optimized changes",
    "simplified": "Simplified changes",
    "refactored": "Refactored changes",
    "reorganized": "Reorganized changes",
    "renamed": "Renamed changes",
    "moved": "Moved changes",
    "copied": "Copied changes",
    "deleted": "Deleted changes",
    "created": "Created changes",
    "updated": "Updated changes",
    "modified": "Modified changes",
    "replaced": "Replaced changes",
    "merged": "Merged changes",
    "split": "Split changes",
    "extracted": "Extracted changes",
    "inlined": "Inlined changes",
    "extracted_to_file": "Extracted to file changes",
    "inlined_from_file": "Inlined from file changes",
    "extracted_to_module": "Extracted to module changes",
    "inlined_from_module": "Inlined from module changes",
    "extracted_to_function": "Extracted to function changes",
    "inlined_from_function": "Inlined from function changes",
})


COMMON_SCOPES: Tuple[str, ...] = (
    "core",
    "ui",
    "api",
    "auth",
    "db",
    "config",
    "utils",
    "components",
    "hooks",
    "services",
    "store",
    "router",
    "middleware",
    "tests",
    "docs",
    "build",
    "deploy",
    "ci",
    "types",
    "styles",
    "assets",
    "i18n",
    "analytics",
    "monitoring",
    "logging",
    "caching",
    "validation",
    "security",
    "performance",
    "accessibility",
    "seo",
    "email",
    "notifications",
    "payments",
    "integrations",
    "webhooks",
    "scheduler",
    "queue",
    "storage",
    "backup",
    "migration",
    "database",
    "server",
    "client",
    "mobile",
    "desktop",
    "cli",
    "admin",
    "dashboard",
    "settings",
    "profile",
    "search",
    "filters",
    "pagination",
    "sorting",
    "forms",
    "modals",
    "dialogs",
    "toasts",
    "loading",
    "error",
    "success",
    "warning",
    "info",
)


# Order in which a single type is picked when several were inferred.
TYPE_PRIORITY: Tuple[str, ...] = (
    "fix",
    "feat",
    "test",
    "docs",
    "style",
    "refactor",
    "perf",
    "build",
    "ci",
    "chore",
    "config",
    "deps",
)

DEFAULT_TYPE = "feat"
DEFAULT_DESCRIPTION = "update project files"
