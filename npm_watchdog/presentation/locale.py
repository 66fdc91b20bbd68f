"""Localized message tables for the CLI report."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Locale(str, enum.Enum):
    EN = "en"
    ES = "es"


DEFAULT_LOCALE = Locale.EN


@dataclass(frozen=True)
class Messages:
    taglines: tuple[str, ...]
    description: str
    json_option: str
    ignore_option: str
    root_option: str
    lang_option: str
    minimal_option: str
    error_dir: str
    error_manifest_missing: str
    error_manifest_invalid: str
    no_dependencies: str
    no_source_files: str
    total_dependencies: str
    used_dependencies: str
    unused_dependencies: str
    ignored_modules: str
    unused_label: str
    files_scanned: str
    read_warning: str
    suggestion: str
    good_job: str
    error: str


MESSAGES: dict[Locale, Messages] = {
    Locale.EN: Messages(
        taglines=(
            "Woof woof! I've sniffed out some forgotten dependencies...",
            "Bark! Looks like you have some dependencies gathering dust...",
            "The watchdog has found dependencies that are taking a nap...",
            "These packages are as used as an umbrella in the desert...",
            "Dependencies found hibernating in your package.json...",
        ),
        description="A tool to detect unused dependencies in JavaScript/TypeScript projects",
        json_option="Export results in JSON format",
        ignore_option="Modules to ignore (comma separated)",
        root_option="Base path for monorepo projects",
        lang_option="Language (en, es)",
        minimal_option="Hide the banner and tagline",
        error_dir="Error: Directory {path} does not exist",
        error_manifest_missing="Error: package.json not found in {path}",
        error_manifest_invalid="Error: Could not parse {path}: {reason}",
        no_dependencies="No dependencies found in package.json",
        no_source_files="No source files found to analyze",
        total_dependencies="Total dependencies: {count}",
        used_dependencies="Used dependencies: {count}",
        unused_dependencies="Unused dependencies: {count}",
        ignored_modules="Ignored modules: {names}",
        unused_label="Unused dependencies:",
        files_scanned="Files analyzed: {count}",
        read_warning="Warning: Could not read file {path}: {error}",
        suggestion="Suggestion: Consider removing these dependencies with:",
        good_job="Good job! No unused dependencies found.",
        error="Error:",
    ),
    Locale.ES: Messages(
        taglines=(
            "¡Woof woof! He olfateado algunas dependencias olvidadas...",
            "¡Guau! Parece que tienes algunas dependencias acumulando polvo...",
            "El watchdog ha encontrado dependencias que están durmiendo la siesta...",
            "Estos paquetes están tan utilizados como un paraguas en el desierto...",
            "Dependencias encontradas hibernando en tu package.json...",
        ),
        description=(
            "Una herramienta para detectar dependencias no utilizadas "
            "en proyectos JavaScript/TypeScript"
        ),
        json_option="Exportar resultados en formato JSON",
        ignore_option="Módulos a ignorar (separados por comas)",
        root_option="Ruta base para proyectos monorepo",
        lang_option="Idioma (en, es)",
        minimal_option="Ocultar el encabezado y el mensaje",
        error_dir="Error: El directorio {path} no existe",
        error_manifest_missing="Error: No se encontró package.json en {path}",
        error_manifest_invalid="Error: No se pudo analizar {path}: {reason}",
        no_dependencies="No se encontraron dependencias en el package.json",
        no_source_files="No se encontraron archivos fuente para analizar",
        total_dependencies="Total de dependencias: {count}",
        used_dependencies="Dependencias utilizadas: {count}",
        unused_dependencies="Dependencias no utilizadas: {count}",
        ignored_modules="Módulos ignorados: {names}",
        unused_label="Dependencias no utilizadas:",
        files_scanned="Archivos analizados: {count}",
        read_warning="Advertencia: No se pudo leer el archivo {path}: {error}",
        suggestion="Sugerencia: Considera eliminar estas dependencias con:",
        good_job="¡Buen trabajo! No se encontraron dependencias no utilizadas.",
        error="Error:",
    ),
}


def resolve_locale(code: str | None) -> Locale:
    """Map a user-supplied code to a supported locale, falling back to English."""
    if code:
        try:
            return Locale(code.strip().lower())
        except ValueError:
            pass
    return DEFAULT_LOCALE


def messages_for(code: str | Locale | None) -> Messages:
    locale = code if isinstance(code, Locale) else resolve_locale(code)
    return MESSAGES[locale]
