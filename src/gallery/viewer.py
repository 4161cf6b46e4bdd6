# src/gallery/viewer.py

import logging
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..tvdb.fanart import TvdbFanartBanner

class FanartViewer:
    def __init__(self, logger: logging.Logger, console: Optional[Console] = None):
        self.logger = logger
        self.console = console or Console()

    def _color_swatches(self, banner: TvdbFanartBanner) -> Text:
        text = Text()
        for color in banner.colors:
            if color is None:
                text.append("?? ", style="dim")
                continue
            text.append("  ", style=f"on {color.to_hex()}")
            text.append(" ")
        return text

    def _image_state(self, loaded: bool, loading: bool, path: Optional[str]) -> str:
        if loading:
            return "[yellow]loading[/yellow]"
        if loaded:
            return "[green]✓[/green]"
        if not path:
            return "[dim]-[/dim]"
        return "[red]✗[/red]"

    def build_table(self, banners: List[TvdbFanartBanner], series_id: Optional[int] = None) -> Table:
        title = f"Fan art for series {series_id}" if series_id is not None else "Fan art"
        table = Table(title=title)
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Resolution")
        table.add_column("Colors")
        table.add_column("Thumb", justify="center")
        table.add_column("Vignette", justify="center")
        table.add_column("Language")
        table.add_column("Rating", justify="right")
        table.add_column("Path", style="dim")

        for banner in banners:
            rating = f"{banner.rating:.1f} ({banner.rating_count})" if banner.rating is not None else "-"
            table.add_row(
                str(banner.id),
                str(banner.resolution) if banner.resolution else "?",
                self._color_swatches(banner),
                self._image_state(banner.is_thumb_loaded, banner.thumb_loading, banner.thumb_path),
                self._image_state(banner.is_vignette_loaded, banner.vignette_loading, banner.vignette_path),
                str(banner.language) if banner.language else "-",
                rating,
                banner.banner_path or ""
            )
        return table

    def show(self, banners: List[TvdbFanartBanner], series_id: Optional[int] = None) -> None:
        if not banners:
            self.console.print(Panel("No fan art found", style="yellow"))
            return

        self.console.print(self.build_table(banners, series_id))

        thumbs = sum(1 for b in banners if b.is_thumb_loaded)
        vignettes = sum(1 for b in banners if b.is_vignette_loaded)
        self.console.print(Panel(
            f"{len(banners)} fan art entries, {thumbs} thumbnails and {vignettes} vignettes in memory",
            style="bold blue"
        ))
