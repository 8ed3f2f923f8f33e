"""Localized issue and suggestion text.

Only the wording depends on the locale; which issues and suggestions are
produced is decided by the analyzers and the scorer.
"""

from seo_audit.constants import DEFAULT_LOCALE, SUPPORTED_LOCALES
from seo_audit.models import SEVERITY_BY_KIND, CheckKind, Issue, IssueKind

PERFORMANCE_FCP = "fcp"
PERFORMANCE_LCP = "lcp"
PERFORMANCE_CLS = "cls"


ISSUE_MESSAGES: dict[str, dict[IssueKind, str]] = {
    "en": {
        IssueKind.TITLE_LENGTH: "Title length ({length}) is not optimal ({min_length}-{max_length} chars)",
        IssueKind.META_DESCRIPTION_LENGTH: "Meta description length ({length}) is not optimal ({min_length}-{max_length} chars)",
        IssueKind.IMAGES_WITHOUT_ALT: "{missing} out of {total} images are missing alt text",
        IssueKind.MISSING_H1: "No H1 heading found on the page",
        IssueKind.HEADING_NOT_STARTING_WITH_H1: "The page does not start with an H1",
        IssueKind.HEADING_LEVEL_JUMP: "Incorrect heading hierarchy jump: from H{from_level} to H{to_level}",
        IssueKind.MULTIPLE_H1: "Found {count} H1 tags (there should be only one)",
        IssueKind.MISSING_CANONICAL: "No canonical tag found",
        IssueKind.MISSING_VIEWPORT: "No viewport meta tag found",
        IssueKind.MISSING_SCHEMA: "No schema markup detected",
        IssueKind.URL_TOO_LONG: "URL length ({length}) is too long. Keep it under {max_length} characters.",
        IssueKind.ROBOTS_TXT_NOT_FOUND: "robots.txt file not found",
        IssueKind.ROBOTS_TXT_UNCHECKED: "Could not check robots.txt file",
        IssueKind.SITEMAP_NOT_FOUND: "sitemap.xml file not found",
        IssueKind.SITEMAP_UNCHECKED: "Could not check sitemap.xml file",
        IssueKind.MISSING_OG_TITLE: "Missing Open Graph title tag",
        IssueKind.MISSING_OG_DESCRIPTION: "Missing Open Graph description tag",
        IssueKind.MISSING_OG_IMAGE: "Missing Open Graph image tag",
        IssueKind.MISSING_TWITTER_CARD: "Missing Twitter Card tag",
        IssueKind.MISSING_TWITTER_TITLE: "Missing Twitter title tag",
        IssueKind.MISSING_TWITTER_DESCRIPTION: "Missing Twitter description tag",
        IssueKind.MISSING_TWITTER_IMAGE: "Missing Twitter image tag",
        IssueKind.NOT_HTTPS: "Site is not using HTTPS",
        IssueKind.SLOW_LOAD_TIME: "Page load time ({load_time}ms) is too slow. Aim for under {max_seconds} seconds.",
        IssueKind.EMAILS_EXPOSED: "Found {count} email(s) in page content",
        IssueKind.PHONE_NUMBERS_EXPOSED: "Found {count} phone number(s) in page content",
        IssueKind.CIFS_EXPOSED: "Found {count} CIF(s) in page content",
        IssueKind.MISSING_META_ROBOTS: "Missing meta robots tag",
        IssueKind.MISSING_HREFLANG: "No hreflang tags found for internationalization",
        IssueKind.BROKEN_LINKS: "Found {count} broken link(s)",
    },
    "es": {
        IssueKind.TITLE_LENGTH: "La longitud del título ({length}) no es óptima ({min_length}-{max_length} caracteres)",
        IssueKind.META_DESCRIPTION_LENGTH: "La longitud de la meta descripción ({length}) no es óptima ({min_length}-{max_length} caracteres)",
        IssueKind.IMAGES_WITHOUT_ALT: "{missing} de {total} imágenes no tienen texto alternativo",
        IssueKind.MISSING_H1: "No se encontró ningún H1 en la página",
        IssueKind.HEADING_NOT_STARTING_WITH_H1: "La página no comienza con un H1",
        IssueKind.HEADING_LEVEL_JUMP: "Salto incorrecto de jerarquía: de H{from_level} a H{to_level}",
        IssueKind.MULTIPLE_H1: "Se encontraron {count} etiquetas H1 (debería haber solo una)",
        IssueKind.MISSING_CANONICAL: "Falta la URL canónica",
        IssueKind.MISSING_VIEWPORT: "Falta la etiqueta meta viewport para móviles",
        IssueKind.MISSING_SCHEMA: "No se detectó marcado de esquema",
        IssueKind.URL_TOO_LONG: "La URL es demasiado larga ({length}). Mantenla por debajo de {max_length} caracteres.",
        IssueKind.ROBOTS_TXT_NOT_FOUND: "No se encontró el archivo robots.txt",
        IssueKind.ROBOTS_TXT_UNCHECKED: "No se pudo comprobar el archivo robots.txt",
        IssueKind.SITEMAP_NOT_FOUND: "No se encontró el archivo sitemap.xml",
        IssueKind.SITEMAP_UNCHECKED: "No se pudo comprobar el archivo sitemap.xml",
        IssueKind.MISSING_OG_TITLE: "Falta la etiqueta Open Graph de título",
        IssueKind.MISSING_OG_DESCRIPTION: "Falta la etiqueta Open Graph de descripción",
        IssueKind.MISSING_OG_IMAGE: "Falta la etiqueta Open Graph de imagen",
        IssueKind.MISSING_TWITTER_CARD: "Falta la etiqueta Twitter Card",
        IssueKind.MISSING_TWITTER_TITLE: "Falta la etiqueta de título de Twitter",
        IssueKind.MISSING_TWITTER_DESCRIPTION: "Falta la etiqueta de descripción de Twitter",
        IssueKind.MISSING_TWITTER_IMAGE: "Falta la etiqueta de imagen de Twitter",
        IssueKind.NOT_HTTPS: "El sitio no usa HTTPS",
        IssueKind.SLOW_LOAD_TIME: "El tiempo de carga ({load_time}ms) es demasiado lento. Objetivo: menos de {max_seconds} segundos.",
        IssueKind.EMAILS_EXPOSED: "Se encontraron {count} email(s) en el contenido de la página",
        IssueKind.PHONE_NUMBERS_EXPOSED: "Se encontraron {count} teléfono(s) en el contenido de la página",
        IssueKind.CIFS_EXPOSED: "Se encontraron {count} CIF(s) en el contenido de la página",
        IssueKind.MISSING_META_ROBOTS: "Falta la etiqueta meta robots",
        IssueKind.MISSING_HREFLANG: "No se encontraron etiquetas hreflang para internacionalización",
        IssueKind.BROKEN_LINKS: "Se encontraron {count} enlace(s) roto(s)",
    },
    "ca": {
        IssueKind.TITLE_LENGTH: "La longitud del títol ({length}) no és òptima ({min_length}-{max_length} caràcters)",
        IssueKind.META_DESCRIPTION_LENGTH: "La longitud de la meta descripció ({length}) no és òptima ({min_length}-{max_length} caràcters)",
        IssueKind.IMAGES_WITHOUT_ALT: "{missing} de {total} imatges no tenen text alternatiu",
        IssueKind.MISSING_H1: "No s'ha trobat cap H1 a la pàgina",
        IssueKind.HEADING_NOT_STARTING_WITH_H1: "La pàgina no comença amb un H1",
        IssueKind.HEADING_LEVEL_JUMP: "Salt incorrecte de jerarquia: de H{from_level} a H{to_level}",
        IssueKind.MULTIPLE_H1: "S'han trobat {count} etiquetes H1 (n'hi hauria d'haver només una)",
        IssueKind.MISSING_CANONICAL: "Falta la URL canònica",
        IssueKind.MISSING_VIEWPORT: "Falta l'etiqueta meta viewport per a mòbils",
        IssueKind.MISSING_SCHEMA: "No s'ha detectat marcatge d'esquema",
        IssueKind.URL_TOO_LONG: "La URL és massa llarga ({length}). Mantén-la per sota de {max_length} caràcters.",
        IssueKind.ROBOTS_TXT_NOT_FOUND: "No s'ha trobat el fitxer robots.txt",
        IssueKind.ROBOTS_TXT_UNCHECKED: "No s'ha pogut comprovar el fitxer robots.txt",
        IssueKind.SITEMAP_NOT_FOUND: "No s'ha trobat el fitxer sitemap.xml",
        IssueKind.SITEMAP_UNCHECKED: "No s'ha pogut comprovar el fitxer sitemap.xml",
        IssueKind.MISSING_OG_TITLE: "Falta l'etiqueta Open Graph de títol",
        IssueKind.MISSING_OG_DESCRIPTION: "Falta l'etiqueta Open Graph de descripció",
        IssueKind.MISSING_OG_IMAGE: "Falta l'etiqueta Open Graph d'imatge",
        IssueKind.MISSING_TWITTER_CARD: "Falta l'etiqueta Twitter Card",
        IssueKind.MISSING_TWITTER_TITLE: "Falta l'etiqueta de títol de Twitter",
        IssueKind.MISSING_TWITTER_DESCRIPTION: "Falta l'etiqueta de descripció de Twitter",
        IssueKind.MISSING_TWITTER_IMAGE: "Falta l'etiqueta d'imatge de Twitter",
        IssueKind.NOT_HTTPS: "El lloc no utilitza HTTPS",
        IssueKind.SLOW_LOAD_TIME: "El temps de càrrega ({load_time}ms) és massa lent. Objectiu: menys de {max_seconds} segons.",
        IssueKind.EMAILS_EXPOSED: "S'han trobat {count} correu(s) electrònic(s) al contingut de la pàgina",
        IssueKind.PHONE_NUMBERS_EXPOSED: "S'han trobat {count} telèfon(s) al contingut de la pàgina",
        IssueKind.CIFS_EXPOSED: "S'han trobat {count} CIF(s) al contingut de la pàgina",
        IssueKind.MISSING_META_ROBOTS: "Falta l'etiqueta meta robots",
        IssueKind.MISSING_HREFLANG: "No s'han trobat etiquetes hreflang per a la internacionalització",
        IssueKind.BROKEN_LINKS: "S'han trobat {count} enllaç(os) trencat(s)",
    },
}


SUGGESTION_MESSAGES: dict[str, dict[CheckKind, str]] = {
    "en": {
        CheckKind.TITLE_LENGTH: "Optimize the title length ({length} characters). Ideal: {min_length}-{max_length} characters.",
        CheckKind.META_DESCRIPTION_LENGTH: "Adjust the meta description length ({length} characters). Ideal: {min_length}-{max_length} characters.",
        CheckKind.SINGLE_H1: "Make sure the page has exactly one H1. Current: {count}",
        CheckKind.IMAGES_HAVE_ALT: "Add alternative text to the {missing} images that lack it.",
        CheckKind.CANONICAL: "Add a canonical tag to avoid duplicate content problems.",
        CheckKind.VIEWPORT: "Include a viewport tag to improve the experience on mobile devices.",
        CheckKind.HTTPS: "Serve the site over SSL to improve security and SEO.",
        CheckKind.SCHEMA: "Add schema markup to help search engines understand your content.",
        CheckKind.HEADING_HIERARCHY: "Review and fix the heading hierarchy to improve the content structure.",
        CheckKind.URL_LENGTH: "Consider shortening the URL ({length} characters). Shorter URLs are preferable.",
        CheckKind.OPEN_GRAPH_COMPLETE: "Add Open Graph title, description and image tags so shared links render well.",
        CheckKind.TWITTER_CARD_COMPLETE: "Add Twitter Card, title, description and image tags.",
        CheckKind.LOAD_TIME: "Improve the page load time ({load_time}ms). Target: under {max_seconds} seconds.",
        CheckKind.ROBOTS_TXT: "Create a robots.txt file to control bot access to your site.",
        CheckKind.SITEMAP: "Generate an XML sitemap to help search engines index your content.",
        CheckKind.META_ROBOTS: "Add a meta robots tag to state how the page should be indexed.",
        CheckKind.HREFLANG: "Add hreflang tags if the page is available in other languages.",
        CheckKind.NO_EMAILS: "Remove or obfuscate the {count} email address(es) exposed in the page.",
        CheckKind.NO_PHONE_NUMBERS: "Review the {count} phone number(s) exposed in the page.",
        CheckKind.NO_CIFS: "Review the {count} tax identifier(s) (CIF) exposed in the page.",
        CheckKind.NO_BROKEN_LINKS: "Fix {count} broken links to improve user experience and SEO.",
    },
    "es": {
        CheckKind.TITLE_LENGTH: "Optimiza la longitud del título ({length} caracteres). Ideal: {min_length}-{max_length} caracteres.",
        CheckKind.META_DESCRIPTION_LENGTH: "Ajusta la longitud de la meta descripción ({length} caracteres). Ideal: {min_length}-{max_length} caracteres.",
        CheckKind.SINGLE_H1: "Asegúrate de tener exactamente un H1 en la página. Actual: {count}",
        CheckKind.IMAGES_HAVE_ALT: "Añade texto alternativo a {missing} imágenes que carecen de él.",
        CheckKind.CANONICAL: "Añade una etiqueta canónica para evitar problemas de contenido duplicado.",
        CheckKind.VIEWPORT: "Incluye una etiqueta de viewport para mejorar la experiencia en dispositivos móviles.",
        CheckKind.HTTPS: "Implementa SSL para mejorar la seguridad y el SEO.",
        CheckKind.SCHEMA: "Añade marcado de esquema para mejorar la comprensión de tu contenido por los motores de búsqueda.",
        CheckKind.HEADING_HIERARCHY: "Revisa y corrige la jerarquía de encabezados para mejorar la estructura del contenido.",
        CheckKind.URL_LENGTH: "Considera acortar la URL ({length} caracteres). Las URLs más cortas son preferibles.",
        CheckKind.OPEN_GRAPH_COMPLETE: "Añade las etiquetas Open Graph de título, descripción e imagen.",
        CheckKind.TWITTER_CARD_COMPLETE: "Añade las etiquetas Twitter Card de tarjeta, título, descripción e imagen.",
        CheckKind.LOAD_TIME: "Mejora el tiempo de carga de la página ({load_time}ms). Objetivo: menos de {max_seconds} segundos.",
        CheckKind.ROBOTS_TXT: "Crea un archivo robots.txt para controlar el acceso de los bots a tu sitio.",
        CheckKind.SITEMAP: "Genera un sitemap XML para ayudar a los motores de búsqueda a indexar tu contenido.",
        CheckKind.META_ROBOTS: "Añade una etiqueta meta robots para indicar cómo debe indexarse la página.",
        CheckKind.HREFLANG: "Añade etiquetas hreflang si la página está disponible en otros idiomas.",
        CheckKind.NO_EMAILS: "Elimina u oculta las {count} direcciones de email expuestas en la página.",
        CheckKind.NO_PHONE_NUMBERS: "Revisa los {count} teléfonos expuestos en la página.",
        CheckKind.NO_CIFS: "Revisa los {count} CIF expuestos en la página.",
        CheckKind.NO_BROKEN_LINKS: "Corrige {count} enlaces rotos para mejorar la experiencia del usuario y el SEO.",
    },
    "ca": {
        CheckKind.TITLE_LENGTH: "Optimitza la longitud del títol ({length} caràcters). Ideal: {min_length}-{max_length} caràcters.",
        CheckKind.META_DESCRIPTION_LENGTH: "Ajusta la longitud de la meta descripció ({length} caràcters). Ideal: {min_length}-{max_length} caràcters.",
        CheckKind.SINGLE_H1: "Assegura't de tenir exactament un H1 a la pàgina. Actual: {count}",
        CheckKind.IMAGES_HAVE_ALT: "Afegeix text alternatiu a {missing} imatges que no en tenen.",
        CheckKind.CANONICAL: "Afegeix una etiqueta canònica per evitar problemes de contingut duplicat.",
        CheckKind.VIEWPORT: "Inclou una etiqueta de viewport per millorar l'experiència en dispositius mòbils.",
        CheckKind.HTTPS: "Implementa SSL per millorar la seguretat i el SEO.",
        CheckKind.SCHEMA: "Afegeix marcatge d'esquema per millorar la comprensió del teu contingut pels motors de cerca.",
        CheckKind.HEADING_HIERARCHY: "Revisa i corregeix la jerarquia d'encapçalaments per millorar l'estructura del contingut.",
        CheckKind.URL_LENGTH: "Considera escurçar la URL ({length} caràcters). Les URLs més curtes són preferibles.",
        CheckKind.OPEN_GRAPH_COMPLETE: "Afegeix les etiquetes Open Graph de títol, descripció i imatge.",
        CheckKind.TWITTER_CARD_COMPLETE: "Afegeix les etiquetes Twitter Card de targeta, títol, descripció i imatge.",
        CheckKind.LOAD_TIME: "Millora el temps de càrrega de la pàgina ({load_time}ms). Objectiu: menys de {max_seconds} segons.",
        CheckKind.ROBOTS_TXT: "Crea un fitxer robots.txt per controlar l'accés dels bots al teu lloc.",
        CheckKind.SITEMAP: "Genera un sitemap XML per ajudar els motors de cerca a indexar el teu contingut.",
        CheckKind.META_ROBOTS: "Afegeix una etiqueta meta robots per indicar com s'ha d'indexar la pàgina.",
        CheckKind.HREFLANG: "Afegeix etiquetes hreflang si la pàgina està disponible en altres idiomes.",
        CheckKind.NO_EMAILS: "Elimina o amaga les {count} adreces de correu exposades a la pàgina.",
        CheckKind.NO_PHONE_NUMBERS: "Revisa els {count} telèfons exposats a la pàgina.",
        CheckKind.NO_CIFS: "Revisa els {count} CIF exposats a la pàgina.",
        CheckKind.NO_BROKEN_LINKS: "Corregeix {count} enllaços trencats per millorar l'experiència de l'usuari i el SEO.",
    },
}


PERFORMANCE_SUGGESTIONS: dict[str, dict[str, str]] = {
    "en": {
        PERFORMANCE_FCP: "Optimize First Contentful Paint ({value}ms). Target: under {target} seconds.",
        PERFORMANCE_LCP: "Improve Largest Contentful Paint ({value}ms). Target: under {target} seconds.",
        PERFORMANCE_CLS: "Reduce Cumulative Layout Shift ({value}). Target: under {target}.",
    },
    "es": {
        PERFORMANCE_FCP: "Optimiza el First Contentful Paint ({value}ms). Objetivo: menos de {target} segundos.",
        PERFORMANCE_LCP: "Mejora el Largest Contentful Paint ({value}ms). Objetivo: menos de {target} segundos.",
        PERFORMANCE_CLS: "Reduce el Cumulative Layout Shift ({value}). Objetivo: menos de {target}.",
    },
    "ca": {
        PERFORMANCE_FCP: "Optimitza el First Contentful Paint ({value}ms). Objectiu: menys de {target} segons.",
        PERFORMANCE_LCP: "Millora el Largest Contentful Paint ({value}ms). Objectiu: menys de {target} segons.",
        PERFORMANCE_CLS: "Redueix el Cumulative Layout Shift ({value}). Objectiu: menys de {target}.",
    },
}


def _catalog(catalogs: dict, locale: str) -> dict:
    if locale not in SUPPORTED_LOCALES:
        locale = DEFAULT_LOCALE
    return catalogs[locale]


def format_decimal(value: float, locale: str) -> str:
    """Format a decimal with the locale's separator, e.g. 1.8 or 1,8."""
    text = f"{value:g}"
    return text.replace(".", ",") if locale in ("es", "ca") else text


def build_issue(kind: IssueKind, locale: str = DEFAULT_LOCALE, **values) -> Issue:
    """Create an issue with localized text and its severity from the lookup table."""
    message = _catalog(ISSUE_MESSAGES, locale)[kind].format(**values)
    return Issue(kind=kind, message=message, severity=SEVERITY_BY_KIND[kind])


def suggestion_text(check: CheckKind, locale: str = DEFAULT_LOCALE, **values) -> str:
    return _catalog(SUGGESTION_MESSAGES, locale)[check].format(**values)


def performance_suggestion_text(metric: str, locale: str = DEFAULT_LOCALE, **values) -> str:
    return _catalog(PERFORMANCE_SUGGESTIONS, locale)[metric].format(**values)
