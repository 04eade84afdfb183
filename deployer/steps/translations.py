"""Push changed translation files to localeapp.com."""

import re
from pathlib import Path
from typing import Any

from deployer.config import Settings
from deployer.core.exceptions import ExternalCommandFailure
from deployer.models.deployment import LocaleFile
from deployer.steps.base import BaseStep, DeploymentContext

# Only <xx>.yml files are locales; other YAML in the directory is not pushed
LOCALE_FILE_PATTERN = re.compile(r"^[a-z]{2}\.yml$")


def resolve_locales(settings: Settings, root: Path) -> list[LocaleFile]:
    """Build the list of locale files to check.

    Configured locales come first, in order. With ``discover_locales``,
    two-letter files found in the locale directory are appended, sorted.
    """
    codes = list(dict.fromkeys(settings.locales))

    if settings.discover_locales:
        directory = root / settings.locale_directory
        if directory.is_dir():
            found = sorted(
                path.stem
                for path in directory.iterdir()
                if path.is_file() and LOCALE_FILE_PATTERN.match(path.name)
            )
            codes.extend(code for code in found if code not in codes)

    directory = settings.locale_directory.rstrip("/")
    return [LocaleFile(code=code, path=f"{directory}/{code}.yml") for code in codes]


class PushTranslationsStep(BaseStep):
    """Diff each locale file against the target and push the ones that changed.

    Relies on the preview step having fetched the remote. Locales are
    independent: a failed push is logged and the next locale still runs.
    """

    @property
    def name(self) -> str:
        return "push_translations"

    @property
    def description(self) -> str:
        return "Push changed locale files to localeapp"

    def execute(self, context: DeploymentContext) -> dict[str, Any] | None:
        locales = resolve_locales(context.settings, context.root)
        context.report.locales = locales

        for locale in locales:
            changes = context.git.diff(context.main_ref, locale.path)
            locale.changed = bool(changes.strip())

            if not locale.changed:
                context.echo(
                    f"No new translations in {locale.code}.yml, which doesn't already "
                    f"exist on {context.remote}. -> Skipping push to localeapp.com."
                )
                self.logger.info("step.push_translations.unchanged", locale=locale.code)
                continue

            context.echo(
                f"New translations in {locale.code}.yml, compared to {context.remote}. "
                "-> Pushing it to localeapp.com."
            )
            try:
                context.localeapp.push(locale.path)
            except ExternalCommandFailure as e:
                locale.error = e.message
                self.logger.error(
                    "step.push_translations.push_failed",
                    locale=locale.code,
                    returncode=e.returncode,
                )
            else:
                locale.pushed = True
                self.logger.info("step.push_translations.pushed", locale=locale.code)

        return {
            "checked": len(locales),
            "pushed": sum(1 for locale in locales if locale.pushed),
            "failed": sum(1 for locale in locales if locale.error),
        }
