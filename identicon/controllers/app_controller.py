"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без вычисления идентикона).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; вычисления вынесены в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from tkinter import filedialog, TclError
from typing import Optional, Tuple

import customtkinter as ctk

from identicon.models.image_model import IdenticonImage
from identicon.models.mode_model import mode_from_name
from identicon.services.hash_service import HashService
from identicon.services.identicon_service import DEFAULT_SIZE, Identicon
from identicon.services.image_service import ImageService
from identicon.ui.bottom_bar import BottomBar
from identicon.ui.image_viewer import ImageViewer
from identicon.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)

# больше этого окно предпросмотра только тормозит
MAX_PREVIEW_SIZE = 4096


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Пересчёт идентикона при каждом изменении параметров.
    - Сохранение результата через `ImageService`.
    - Синхронизация состояния зума.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk

    _hash_service: HashService = field(default_factory=HashService)
    _image_service: ImageService = field(default_factory=ImageService)
    _current: Optional[IdenticonImage] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.sidebar.on_params_change = self._handle_params_change
        self.sidebar.on_save = self._handle_save
        self.viewer.on_cursor_move = self._handle_cursor_move
        self.viewer.on_zoom_change = self._handle_viewer_zoom_changed

        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_preset = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit

    # ---- Handlers ----
    def _handle_params_change(self) -> None:
        first_render = self._current is None
        try:
            rendered = self._render_from_sidebar()
        except ValueError as exc:
            # SourceTooShortError тоже ValueError: показываем, но не роняем окно
            logger.warning("cannot render identicon: %s", exc)
            self.sidebar.set_status(str(exc))
            return

        self._current = rendered
        self.sidebar.set_status("")
        self.sidebar.set_identicon_info(rendered)
        if rendered is None:
            self.viewer.set_image(None)
            return
        self.viewer.set_image(rendered.pil_image, keep_zoom=not first_render)
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())

    def _handle_save(self) -> None:
        if self._current is None:
            self.sidebar.set_status("Нечего сохранять: введите текст или хеш")
            return
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить идентикон",
                defaultextension=".png",
                initialfile=f"{self._current.source_hex[:12]}.png",
                filetypes=(("PNG", "*.png"), ("BMP", "*.bmp"), ("All files", "*.*")),
            )
        except TclError:
            logger.exception("save dialog failed")
            return
        if not file_path:
            return

        try:
            self._image_service.save_image(self._current.pil_image, file_path)
        except (FileNotFoundError, ValueError, OSError) as exc:
            logger.warning("save failed: %s", exc)
            self.sidebar.set_status(str(exc))
            return
        self.sidebar.set_status(f"Сохранено: {file_path}")

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgb: Optional[Tuple[int, ...]]) -> None:
        self.sidebar.update_cursor_info(x, y, rgb)

    def _handle_viewer_zoom_changed(self, zoom_percent: int) -> None:
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.viewer.set_zoom_percent(zoom_percent)

    def _handle_zoom_fit(self) -> None:
        self.viewer.set_zoom_to_fit()
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())

    # ---- Helpers ----
    def _render_from_sidebar(self) -> Optional[IdenticonImage]:
        """Собирает параметры из сайдбара и считает идентикон; пустой ввод даёт None."""
        text, algorithm, is_hex = self.sidebar.get_source_params()
        if not text.strip():
            return None
        source = self._hash_service.from_hex(text) if is_hex else self._hash_service.digest(text, algorithm)

        mode_name, saturation, brightness = self.sidebar.get_mode_params()
        mode = mode_from_name(mode_name, saturation=saturation, brightness=brightness)
        size = max(1, min(MAX_PREVIEW_SIZE, self.sidebar.get_size(default=DEFAULT_SIZE)))
        return Identicon(source, size=size, mode=mode).render()
