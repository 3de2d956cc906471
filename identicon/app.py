from __future__ import annotations

from typing import Optional

import customtkinter as ctk

from identicon.config.loader import Config
from identicon.controllers.app_controller import AppController
from identicon.ui.bottom_bar import BottomBar
from identicon.ui.image_viewer import ImageViewer
from identicon.ui.sidebar import Sidebar


class IdenticonApp(ctk.CTk):
    def __init__(self, config: Optional[Config] = None) -> None:
        super().__init__()
        config = config or Config()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Identicon Studio")
        self.minsize(900, 600)

        # root layout: left viewer, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(
            self,
            mode=config.mode,
            saturation=config.saturation,
            brightness=config.brightness,
            size=config.size,
            algorithm=config.hash_algorithm,
        )
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(viewer=self._viewer, sidebar=self._sidebar, bottom=self._bottom, window=self)
        self._controller.bind_events()
