"""Tk main window: location entry, weather/trail display and actions."""

import tkinter as tk
from tkinter import ttk

from hikeon.controllers.chatbot import ChatbotController
from hikeon.controllers.location import LocationController
from hikeon.controllers.weather import WeatherController
from hikeon.models.commands import HikingSearchRequest, SuggestionRequest, WeatherRequest
from hikeon.services.chatbot import ChatbotService
from hikeon.ui.chatbot_window import ChatbotWindow
from hikeon.ui.tasks import TaskRunner, UiDispatcher

FONT_NAME = "Arial"
TITLE_COLOR = "#228b22"
WEATHER_BORDER_COLOR = "#6495ed"
WEATHER_LABEL_COLOR = "#4682b4"
DISPLAY_BACKGROUND = "#f0f8ff"
PADDING = 10
SUGGEST_DELAY_MS = 300


class MainFrame:
    """Main HikeOn window."""

    def __init__(
        self,
        root: tk.Tk,
        weather_controller: WeatherController,
        location_controller: LocationController,
        chatbot_service: ChatbotService,
    ):
        self.root = root
        self.weather_controller = weather_controller
        self.location_controller = location_controller
        self.chatbot_service = chatbot_service

        self.dispatcher = UiDispatcher(root)
        self.tasks = TaskRunner(self.dispatcher)
        self._suggest_after_id = None

        root.title("HikeOn Outdoor Event Planner")
        root.geometry("600x600")
        root.protocol("WM_DELETE_WINDOW", self.close)

        self._build_title()
        self._build_center()
        self._build_footer()
        self.dispatcher.start()

    def _build_title(self):
        tk.Label(
            self.root, text="HikeOn", fg=TITLE_COLOR, font=(FONT_NAME, 24, "bold")
        ).pack(side=tk.TOP, pady=PADDING)

    def _build_center(self):
        center = tk.Frame(self.root, padx=20, pady=20)
        center.pack(fill=tk.BOTH, expand=True)
        center.columnconfigure(1, weight=1)

        tk.Label(center, text="Location:", font=(FONT_NAME, 16)).grid(
            row=0, column=0, padx=PADDING, pady=PADDING, sticky="w"
        )
        self.location_var = tk.StringVar()
        self.location_field = ttk.Combobox(center, textvariable=self.location_var, width=30)
        self.location_field.grid(row=0, column=1, padx=PADDING, pady=PADDING, sticky="ew")
        self.location_field.bind("<KeyRelease>", self._on_location_typed)

        display_frame = tk.Frame(
            center, highlightbackground=WEATHER_BORDER_COLOR, highlightthickness=2,
            bg=DISPLAY_BACKGROUND,
        )
        display_frame.grid(row=1, column=0, columnspan=2, padx=PADDING, pady=PADDING, sticky="nsew")
        center.rowconfigure(1, weight=1)
        tk.Label(
            display_frame, text="Weather & Forecast:", font=(FONT_NAME, 16, "bold"),
            fg=WEATHER_LABEL_COLOR, bg=DISPLAY_BACKGROUND,
        ).pack(anchor="w")
        self.display = tk.Text(
            display_frame, height=10, width=30, wrap=tk.WORD, font=(FONT_NAME, 14), state=tk.DISABLED
        )
        scrollbar = tk.Scrollbar(display_frame, command=self.display.yview)
        self.display.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.display.pack(fill=tk.BOTH, expand=True)

        buttons = (
            ("Get Weather", "#4682b4", self.on_get_weather),
            ("Find Nearby Hiking Trails", "#228b22", self.on_find_trails),
            ("HikeOn AI", "#ffa500", self.open_chatbot),
        )
        for row, (text, color, command) in enumerate(buttons, start=2):
            tk.Button(
                center, text=text, bg=color, font=(FONT_NAME, 14, "bold"), command=command
            ).grid(row=row, column=0, columnspan=2, padx=PADDING, pady=PADDING, sticky="ew")

    def _build_footer(self):
        tk.Label(
            self.root, text="Stay safe and enjoy the outdoors!", font=(FONT_NAME, 12, "italic")
        ).pack(side=tk.BOTTOM, pady=PADDING)

    def set_display(self, text: str) -> None:
        self.display.configure(state=tk.NORMAL)
        self.display.delete("1.0", tk.END)
        self.display.insert(tk.END, text)
        self.display.configure(state=tk.DISABLED)

    def show_error(self, exc: Exception) -> None:
        self.set_display(f"An error occurred: {exc}")

    def on_get_weather(self):
        request = WeatherRequest(city=self.location_var.get())
        if not (request.city or "").strip():
            self.set_display(self.weather_controller.get_formatted_weather(request))
            return
        self.set_display("Fetching weather...")
        self.tasks.submit(
            "display",
            lambda: self.weather_controller.get_formatted_weather(request),
            self.set_display,
            self.show_error,
        )

    def on_find_trails(self):
        request = HikingSearchRequest(location=self.location_var.get())
        if not (request.location or "").strip():
            self.set_display(self.location_controller.search_hiking_spots(request))
            return
        self.set_display("Searching for hiking trails...")
        self.tasks.submit(
            "display",
            lambda: self.location_controller.search_hiking_spots(request),
            self.set_display,
            self.show_error,
        )

    def _on_location_typed(self, event):
        if event.keysym in ("Up", "Down", "Return", "Escape"):
            return
        if self._suggest_after_id is not None:
            self.root.after_cancel(self._suggest_after_id)
        self._suggest_after_id = self.root.after(SUGGEST_DELAY_MS, self._request_suggestions)

    def _request_suggestions(self):
        self._suggest_after_id = None
        request = SuggestionRequest(text=self.location_var.get())
        self.tasks.submit(
            "suggestions",
            lambda: self.location_controller.suggest_locations(request),
            self._show_suggestions,
            lambda exc: self._show_suggestions([]),
        )

    def _show_suggestions(self, suggestions: list[str]) -> None:
        self.location_field.configure(values=suggestions)

    def open_chatbot(self):
        controller = ChatbotController(self.chatbot_service)
        ChatbotWindow(tk.Toplevel(self.root), controller, self.tasks)

    def close(self):
        self.dispatcher.stop()
        self.tasks.shutdown()
        self.root.destroy()
