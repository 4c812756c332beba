"""Built-in sample listings used when the catalog file cannot be processed."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from modcatalog import logger
from modcatalog.catalog.processor import CatalogProcessor
from modcatalog.models import InsertApp

SAMPLE_APPS: tuple[InsertApp, ...] = (
    InsertApp(
        name="WhatsApp Plus",
        developer="Meta",
        description="Versión modificada de WhatsApp con funciones adicionales y personalización avanzada para una mejor experiencia de mensajería.",
        category="social",
        download_url="https://mediafire.com/whatsapp-plus",
        icon_url="https://upload.wikimedia.org/wikipedia/commons/6/6b/WhatsApp.svg",
        rating=45,
        downloads="10M+",
        size="45MB",
        version="2.1.4",
        languages="Español, Inglés, Portugués",
        features=["Sin anuncios", "Temas personalizados", "Mayor privacidad", "Funciones premium"],
        is_featured=True,
    ),
    InsertApp(
        name="Spotify Premium",
        developer="Spotify AB",
        description="Disfruta de música sin límites con todas las funciones premium desbloqueadas, sin anuncios y con calidad superior.",
        category="media",
        download_url="https://mediafire.com/spotify-premium",
        icon_url="https://upload.wikimedia.org/wikipedia/commons/1/19/Spotify_logo_without_text.svg",
        rating=48,
        downloads="50M+",
        size="68MB",
        version="8.7.12",
        languages="Múltiples idiomas",
        features=["Sin anuncios", "Calidad superior", "Descargas ilimitadas", "Modo offline"],
        is_featured=True,
    ),
    InsertApp(
        name="Instagram Pro",
        developer="Meta",
        description="Versión mejorada de Instagram con funciones adicionales de privacidad, descarga de contenido y personalización.",
        category="social",
        download_url="https://mediafire.com/instagram-pro",
        icon_url="https://upload.wikimedia.org/wikipedia/commons/a/a5/Instagram_icon.png",
        rating=42,
        downloads="25M+",
        size="52MB",
        version="3.2.1",
        requirements="Android 6.0+",
        features=["Descarga de fotos/videos", "Sin anuncios", "Zoom de fotos", "Privacidad mejorada"],
        is_featured=True,
    ),
    InsertApp(
        name="TikTok Pro",
        developer="ByteDance",
        description="Versión premium de TikTok sin anuncios y con funciones adicionales para creadores de contenido.",
        category="media",
        download_url="https://mediafire.com/tiktok-pro",
        rating=46,
        downloads="100M+",
        size="85MB",
        version="4.1.2",
        languages="Múltiples idiomas",
        features=["Sin anuncios", "Descarga de videos", "Herramientas de edición", "Sin marca de agua"],
    ),
    InsertApp(
        name="YouTube Vanced",
        developer="Team Vanced",
        description="Cliente modificado de YouTube con bloqueo de anuncios, reproducción en segundo plano y muchas más funciones.",
        category="media",
        download_url="https://mediafire.com/youtube-vanced",
        icon_url="https://upload.wikimedia.org/wikipedia/commons/0/09/YouTube_full-color_icon_%282017%29.svg",
        rating=47,
        downloads="75M+",
        size="68MB",
        version="17.03.38",
        languages="Múltiples idiomas",
        features=["Sin anuncios", "Reproducción de fondo", "Picture-in-Picture", "Controles gestuales"],
    ),
    InsertApp(
        name="Termux",
        developer="Fredrik Fornwall",
        description="Terminal de Linux completo para Android con acceso a herramientas de línea de comandos y programación.",
        category="tools",
        download_url="https://mediafire.com/termux",
        icon_url="https://f-droid.org/repo/com.termux/en-US/icon_aQhms5TgSfC_5iSdLs4WgBOk.png",
        rating=43,
        downloads="5M+",
        size="15MB",
        version="0.118.0",
        requirements="Android 7.0+",
        languages="Inglés",
        features=["Terminal completo", "Paquetes Linux", "Desarrollo móvil", "Scripts automatizados"],
    ),
)


def sample_apps() -> List[InsertApp]:
    return list(SAMPLE_APPS)


def load_apps_with_fallback(
    path: Path,
    processor: CatalogProcessor,
    *,
    strict: bool = False,
) -> Tuple[List[InsertApp], bool]:
    """Process the catalog at *path*, or return the sample listings.

    Returns ``(apps, used_fallback)``. With ``strict`` the load error is
    re-raised instead.
    """
    try:
        return processor.process_file(path), False
    except (OSError, ValueError) as exc:
        if strict:
            raise
        logger.get_logger().catalog_fallback(str(path), exc)
        return sample_apps(), True
