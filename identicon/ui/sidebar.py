"""Боковая панель: ввод источника, параметры режима, информация о результате.

Принципы:
- SRP: управляет только UI параметров, не содержит алгоритмов.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk

from identicon.models.image_model import IdenticonImage
from identicon.models.mode_model import IdenticonJS
from identicon.services.hash_service import ALGORITHMS

_MODE_LABELS = {"GitHub": "github", "Identicon.js": "identiconjs"}


def _rgba_to_hex(rgba: Tuple[int, ...]) -> str:
    """Преобразует RGB(A) в HEX (без альфа)."""
    r, g, b = rgba[:3]
    return f"#{r:02X}{g:02X}{b:02X}"


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: источник, режим, размер, информация, курсор."""
    def __init__(
        self,
        master: ctk.CTk,
        *,
        mode: str = "github",
        saturation: float = 0.7,
        brightness: float = 0.5,
        size: int = 420,
        algorithm: str = "md5",
        **kwargs,
    ) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_params_change: Optional[Callable[[], None]] = None
        self.on_save: Optional[Callable[[], None]] = None

        # Источник
        self._title = ctk.CTkLabel(self, text="Источник", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._text_val = ctk.StringVar(value="")
        self._text_entry = ctk.CTkEntry(self, textvariable=self._text_val, placeholder_text="Имя пользователя или хеш")
        self._text_entry.grid(row=1, column=0, padx=8, pady=(0, 4), sticky="ew")
        self._text_entry.bind("<KeyRelease>", self._emit_params_change)

        self._algorithm_menu = ctk.CTkOptionMenu(self, values=list(ALGORITHMS), command=self._emit_params_change)
        self._algorithm_menu.set(algorithm)
        self._algorithm_menu.grid(row=2, column=0, padx=8, pady=(0, 4), sticky="w")

        self._hex_val = ctk.BooleanVar(value=False)
        self._hex_check = ctk.CTkCheckBox(
            self, text="Ввод: готовый hex-хеш", variable=self._hex_val, command=self._on_hex_toggle
        )
        self._hex_check.grid(row=3, column=0, padx=8, pady=(0, 12), sticky="w")

        # Режим
        self._mode_title = ctk.CTkLabel(self, text="Режим", font=ctk.CTkFont(size=16, weight="bold"))
        self._mode_title.grid(row=4, column=0, padx=8, pady=(8, 4), sticky="w")

        self._mode_buttons = ctk.CTkSegmentedButton(self, values=list(_MODE_LABELS), command=self._on_mode_change)
        self._mode_buttons.set("Identicon.js" if mode == "identiconjs" else "GitHub")
        self._mode_buttons.grid(row=5, column=0, padx=8, pady=(0, 4), sticky="ew")

        # Identicon.js: насыщенность и яркость
        self._js_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._js_frame.grid_columnconfigure(0, weight=1)
        self._sat_val = ctk.StringVar(value=f"{saturation:.2f}")
        self._sat_label = ctk.CTkLabel(self._js_frame, text="Насыщенность:")
        self._sat_slider = ctk.CTkSlider(self._js_frame, from_=0, to=1, number_of_steps=100, command=self._on_sat_change)
        self._sat_slider.set(saturation)
        self._sat_value = ctk.CTkLabel(self._js_frame, textvariable=self._sat_val, width=48, anchor="w")
        self._sat_label.grid(row=0, column=0, padx=0, pady=(0, 2), sticky="w")
        self._sat_slider.grid(row=1, column=0, padx=0, pady=(0, 2), sticky="ew")
        self._sat_value.grid(row=2, column=0, padx=0, pady=(0, 4), sticky="w")

        self._bri_val = ctk.StringVar(value=f"{brightness:.2f}")
        self._bri_label = ctk.CTkLabel(self._js_frame, text="Яркость:")
        self._bri_slider = ctk.CTkSlider(self._js_frame, from_=0, to=1, number_of_steps=100, command=self._on_bri_change)
        self._bri_slider.set(brightness)
        self._bri_value = ctk.CTkLabel(self._js_frame, textvariable=self._bri_val, width=48, anchor="w")
        self._bri_label.grid(row=3, column=0, padx=0, pady=(0, 2), sticky="w")
        self._bri_slider.grid(row=4, column=0, padx=0, pady=(0, 2), sticky="ew")
        self._bri_value.grid(row=5, column=0, padx=0, pady=(0, 4), sticky="w")
        self._toggle_js_controls(visible=(mode == "identiconjs"))

        # Размер
        self._size_val = ctk.StringVar(value=str(size))
        self._size_label = ctk.CTkLabel(self, text="Размер, px:")
        self._size_entry = ctk.CTkEntry(self, textvariable=self._size_val, width=80)
        self._size_label.grid(row=7, column=0, padx=8, pady=(8, 2), sticky="w")
        self._size_entry.grid(row=8, column=0, padx=8, pady=(0, 8), sticky="w")
        self._size_entry.bind("<FocusOut>", self._emit_params_change)
        self._size_entry.bind("<Return>", self._emit_params_change)

        self._save_btn = ctk.CTkButton(self, text="Сохранить изображение…", command=self._emit_save)
        self._save_btn.grid(row=9, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=10, column=0, padx=8, pady=(8, 4), sticky="w")

        self._hash_val = ctk.StringVar(value="—")
        self._color_val = ctk.StringVar(value="—")
        self._hsl_val = ctk.StringVar(value="—")
        self._status_val = ctk.StringVar(value="")

        self._info_hash = ctk.CTkLabel(self, textvariable=self._hash_val, wraplength=250, anchor="w", justify="left")
        self._info_color = ctk.CTkLabel(self, textvariable=self._color_val, anchor="w", justify="left")
        self._info_hsl = ctk.CTkLabel(self, textvariable=self._hsl_val, anchor="w", justify="left")
        self._info_status = ctk.CTkLabel(
            self, textvariable=self._status_val, wraplength=250, anchor="w", justify="left", text_color="#D9534F"
        )

        self._info_hash.grid(row=11, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_color.grid(row=12, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_hsl.grid(row=13, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_status.grid(row=14, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=ctk.CTkFont(size=16, weight="bold"))
        self._cursor_title.grid(row=15, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgb_val = ctk.StringVar(value="—")

        self._cursor_xy = ctk.CTkLabel(self, textvariable=self._cursor_xy_val, anchor="w", justify="left")
        self._cursor_rgb = ctk.CTkLabel(self, textvariable=self._cursor_rgb_val, anchor="w", justify="left")

        self._cursor_xy.grid(row=16, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_rgb.grid(row=17, column=0, padx=8, pady=(0, 2), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def get_source_params(self) -> Tuple[str, str, bool]:
        """Возвращает (текст, алгоритм хеша, признак hex-ввода)."""
        return self._text_val.get(), self._algorithm_menu.get(), bool(self._hex_val.get())

    def get_mode_params(self) -> Tuple[str, float, float]:
        """Возвращает (имя режима, насыщенность, яркость)."""
        mode = _MODE_LABELS.get(self._mode_buttons.get(), "github")
        return mode, float(self._sat_slider.get()), float(self._bri_slider.get())

    def get_size(self, default: int = 420) -> int:
        """Размер из поля ввода; нечисловое значение заменяется на `default`."""
        try:
            return int(self._size_val.get().strip())
        except ValueError:
            return default

    def set_identicon_info(self, rendered: Optional[IdenticonImage]) -> None:
        if rendered is None:
            self._hash_val.set("—")
            self._color_val.set("—")
            self._hsl_val.set("—")
            return
        self._hash_val.set(f"Хеш: {rendered.source_hex}")
        mode_label = "Identicon.js" if isinstance(rendered.mode, IdenticonJS) else "GitHub"
        self._color_val.set(f"Цвет: {rendered.foreground_hex}  ({mode_label}, {rendered.width}×{rendered.height})")
        hsl = rendered.hsl
        self._hsl_val.set(f"HSL: {hsl.hue:.1f}°, {hsl.saturation:.1f}%, {hsl.luminance:.1f}%")

    def set_status(self, message: str) -> None:
        self._status_val.set(message)

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgb: Optional[Tuple[int, ...]]) -> None:
        if x is None or y is None or rgb is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgb_val.set("—")
            return
        self._cursor_xy_val.set(f"X: {x}, Y: {y}")
        self._cursor_rgb_val.set(f"RGB: {tuple(rgb[:3])}  {_rgba_to_hex(rgb)}")

    # ---- Events ----
    def _emit_params_change(self, _event: object = None) -> None:
        if self.on_params_change:
            self.on_params_change()

    def _emit_save(self) -> None:
        if self.on_save:
            self.on_save()

    def _on_hex_toggle(self) -> None:
        # при вводе hex алгоритм не используется
        self._algorithm_menu.configure(state="disabled" if self._hex_val.get() else "normal")
        self._emit_params_change()

    def _on_mode_change(self, value: str) -> None:
        self._toggle_js_controls(visible=(value == "Identicon.js"))
        self._emit_params_change()

    def _on_sat_change(self, value: float) -> None:
        self._sat_val.set(f"{value:.2f}")
        self._emit_params_change()

    def _on_bri_change(self, value: float) -> None:
        self._bri_val.set(f"{value:.2f}")
        self._emit_params_change()

    # ---- Helpers ----
    def _toggle_js_controls(self, visible: bool) -> None:
        if visible:
            self._js_frame.grid(row=6, column=0, padx=8, pady=(4, 4), sticky="ew")
        else:
            self._js_frame.grid_remove()
