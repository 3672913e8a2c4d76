"""
Feishu Sync Launcher GUI
- 번들 서버 / 이전 설치 상태 표시
- Command Bridge 실행
- 로그 창
"""

import asyncio
import threading
import webbrowser
import tkinter as tk
from tkinter import ttk

from config import APP_NAME, APP_VERSION, load_config, update_config
from services import deployment_detector, server_launcher
from services.bridge_server import BridgeServer
from services.commands import CommandError, check_previous_deployment
from routes.command_routes import create_command_app


class LauncherGUI:
    def __init__(self, config=None):
        self.config = config if config is not None else load_config()
        self.root = tk.Tk()
        self.root.title(f"{APP_NAME} v{APP_VERSION}")
        self.root.geometry("520x420")
        self.root.resizable(False, False)

        self.bridge = None
        self.log_text = None

        self._create_widgets()
        self._setup_log_callbacks()
        self._start_bridge()

        self.root.after(500, self._check_deployment)
        if self.config.get("open_ui_on_start", False):
            self.root.after(500, self._open_ui)

    def _create_widgets(self):
        status_frame = ttk.LabelFrame(self.root, text="Status", padding=8)
        status_frame.pack(fill=tk.X, padx=10, pady=(10, 5))

        target = server_launcher.resolve_launch_target()
        row = ttk.Frame(status_frame)
        row.pack(fill=tk.X, pady=2)
        ttk.Label(row, text="Server:", width=18).pack(side=tk.LEFT)
        server_state = "Found" if target.entry_path.exists() else "server.js missing"
        ttk.Label(row, text=server_state).pack(side=tk.LEFT)

        row = ttk.Frame(status_frame)
        row.pack(fill=tk.X, pady=2)
        ttk.Label(row, text="Previous install:", width=18).pack(side=tk.LEFT)
        self.deploy_status_var = tk.StringVar(value="Checking...")
        self.deploy_status_label = ttk.Label(row, textvariable=self.deploy_status_var, foreground="gray")
        self.deploy_status_label.pack(side=tk.LEFT)

        btn_row = ttk.Frame(status_frame)
        btn_row.pack(fill=tk.X, pady=(5, 0))
        ttk.Button(btn_row, text="Open UI", command=self._open_ui).pack(side=tk.LEFT, padx=2)
        self.check_btn = ttk.Button(btn_row, text="Check again", command=self._check_deployment)
        self.check_btn.pack(side=tk.LEFT, padx=2)

        self.open_ui_var = tk.BooleanVar(value=self.config.get("open_ui_on_start", False))
        ttk.Checkbutton(
            btn_row,
            text="Open UI on start",
            variable=self.open_ui_var,
            command=self._toggle_open_ui_on_start
        ).pack(side=tk.RIGHT)

        # 로그
        log_frame = ttk.LabelFrame(self.root, text="Log", padding=5)
        log_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=(5, 5))

        self.log_text = tk.Text(log_frame, height=10, font=('Consolas', 9), bg='#1e1e1e', fg='#10b981', state=tk.DISABLED)
        scrollbar = ttk.Scrollbar(log_frame, orient=tk.VERTICAL, command=self.log_text.yview)
        self.log_text.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.log_text.pack(fill=tk.BOTH, expand=True)

        ttk.Button(log_frame, text="Clear", command=self._clear_log).pack(anchor=tk.E, pady=(3, 0))

        ttk.Label(self.root, text=f"Launcher v{APP_VERSION}", foreground="gray").pack(side=tk.BOTTOM, pady=3)

    # ============ 로그 콜백 설정 ============
    def _setup_log_callbacks(self):
        def callback(msg):
            self.root.after(0, lambda: self._append_log(msg))

        server_launcher.log_callback = callback
        deployment_detector.log_callback = callback
        self._log_callback = callback

    def _append_log(self, message):
        self.log_text.configure(state=tk.NORMAL)
        self.log_text.insert(tk.END, message + "\n")
        self.log_text.see(tk.END)
        self.log_text.configure(state=tk.DISABLED)

    def _clear_log(self):
        self.log_text.configure(state=tk.NORMAL)
        self.log_text.delete(1.0, tk.END)
        self.log_text.configure(state=tk.DISABLED)

    # ============ Command Bridge ============
    def _start_bridge(self):
        port = self.config.get("command_port", 3199)
        self.bridge = BridgeServer("Bridge", create_command_app(), port=port)
        self.bridge.set_log_callback(self._log_callback)
        self.bridge.start()

    # ============ 이전 설치 확인 ============
    def _check_deployment(self):
        self.check_btn.configure(state=tk.DISABLED)
        self.deploy_status_var.set("Checking...")
        self.deploy_status_label.configure(foreground="gray")

        def run():
            try:
                found = asyncio.run(check_previous_deployment())
            except CommandError as e:
                message = str(e)
                self.root.after(0, lambda: self._on_deployment_checked(None, message))
                return
            self.root.after(0, lambda: self._on_deployment_checked(found))

        threading.Thread(target=run, daemon=True).start()

    def _on_deployment_checked(self, found, error=None):
        self.check_btn.configure(state=tk.NORMAL)
        if error is not None:
            self.deploy_status_var.set("Error")
            self.deploy_status_label.configure(foreground="red")
            self._append_log(error)
        elif found:
            self.deploy_status_var.set("Found")
            self.deploy_status_label.configure(foreground="orange")
        else:
            self.deploy_status_var.set("Not found")
            self.deploy_status_label.configure(foreground="green")

    def _toggle_open_ui_on_start(self):
        try:
            update_config(self.config, open_ui_on_start=self.open_ui_var.get())
        except OSError as e:
            self._append_log(f"Config save error: {e}")

    def _open_ui(self):
        webbrowser.open(self.config.get("ui_url", "http://localhost:3000"))

    def run(self):
        self.root.mainloop()


def run_gui(config=None):
    app = LauncherGUI(config)
    app.run()


if __name__ == "__main__":
    run_gui()
