"""Tk window for conversations with the HikeOn assistant."""

import tkinter as tk

from hikeon.controllers.chatbot import ChatbotController
from hikeon.ui.tasks import TaskRunner

FONT_NAME = "Arial"


class ChatbotWindow:
    """Chat transcript, input field and send button."""

    def __init__(self, window: tk.Toplevel, controller: ChatbotController, tasks: TaskRunner):
        self.window = window
        self.controller = controller
        self.tasks = tasks
        self.task_key = f"chatbot-{id(self)}"

        window.title("HikeOn AI Chatbot")
        window.geometry("600x400")
        window.protocol("WM_DELETE_WINDOW", self.close)

        self.conversation = tk.Text(window, wrap=tk.WORD, font=(FONT_NAME, 12), state=tk.DISABLED)
        self.conversation.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        input_row = tk.Frame(window)
        input_row.pack(fill=tk.X, padx=10, pady=(0, 10))
        self.input_var = tk.StringVar()
        entry = tk.Entry(input_row, textvariable=self.input_var, font=(FONT_NAME, 12))
        entry.pack(side=tk.LEFT, fill=tk.X, expand=True)
        entry.bind("<Return>", lambda event: self.send())
        self.send_button = tk.Button(input_row, text="Send", command=self.send)
        self.send_button.pack(side=tk.RIGHT, padx=(10, 0))

        controller.start_chat_session()

    def display_conversation(self, text: str) -> None:
        self.conversation.configure(state=tk.NORMAL)
        self.conversation.delete("1.0", tk.END)
        self.conversation.insert(tk.END, text)
        self.conversation.see(tk.END)
        self.conversation.configure(state=tk.DISABLED)

    def send(self):
        message = self.controller.new_message(self.input_var.get())
        if message is None:
            return
        if not (message.text or "").strip():
            self.display_conversation(self.controller.handle_user_message(message))
            return
        self.input_var.set("")
        self.send_button.configure(state=tk.DISABLED)
        self.tasks.submit(
            self.task_key,
            lambda: self.controller.handle_user_message(message),
            self._on_reply,
            self._on_failure,
        )

    def _on_reply(self, transcript: str) -> None:
        self.send_button.configure(state=tk.NORMAL)
        self.display_conversation(transcript)

    def close(self):
        self.tasks.cancel(self.task_key)
        self.window.destroy()

    def _on_failure(self, exc: Exception) -> None:
        self.send_button.configure(state=tk.NORMAL)
