import logging
from tkinter import StringVar, Listbox, Text, LEFT, BOTH, X, WORD, END
import ttkbootstrap as tb

from studycheck.clock import DigitalClock
from studycheck.config import AppConfig
from studycheck.timer import CountdownTimer, CountdownState, TimerRunningError, MAX_HOUR, MAX_MINUTE
from studycheck.todo import TodoList


class TextHandler(logging.Handler):
    """Schreibt Log-Einträge ins Log-Panel (immer über den UI-Loop)."""

    def __init__(self, widget):
        super().__init__()
        self.widget = widget

    def emit(self, record):
        msg = self.format(record)
        self.widget.after(0, lambda: (
            self.widget.insert(END, msg + "\n"),
            self.widget.see(END)
        ))


# GUI-Klasse für StudyCheck
class StudyCheckApp:
    def __init__(self, config: AppConfig = None):
        self.config = config or AppConfig()
        # Logger initialisieren
        self.logger = logging.getLogger("studycheck")

        # GUI
        style = tb.Style(theme=self.config.theme)
        self.root = style.master
        self.root.title(self.config.title)
        self.root.geometry(self.config.geometry)
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

        # Uhr
        self.clock_var = StringVar(value="--:--:--")
        tb.Label(self.root, textvariable=self.clock_var,
                 font=("Helvetica", 30)).pack(pady=10)
        self.clock = DigitalClock(self.root, self.clock_var.set,
                                  interval_ms=self.config.tick_ms)

        self._build_todo_panel()
        self._build_timer_panel()

        # Log-Panel (unten)
        self.log_txt = Text(self.root, height=5, wrap=WORD)
        self.log_txt.pack(fill=X, padx=10, pady=(10, 10))
        th = TextHandler(self.log_txt)
        th.setFormatter(logging.Formatter("%(asctime)s — %(message)s"))
        self.logger.addHandler(th)
        self._text_handler = th

        self.clock.start()

    def _build_todo_panel(self):
        self.todos = TodoList()
        frame = tb.Frame(self.root, padding=10)
        frame.pack(fill=BOTH, expand=1)

        self.todo_lb = Listbox(frame, selectmode="extended", height=8)
        self.todo_lb.pack(fill=BOTH, expand=1)

        row = tb.Frame(frame)
        row.pack(fill=X, pady=(5, 0))
        self.todo_var = StringVar()
        entry = tb.Entry(row, textvariable=self.todo_var)
        entry.pack(side=LEFT, fill=X, expand=1)
        entry.bind("<Return>", lambda _e: self.on_add_todo())
        tb.Button(row, text="+", bootstyle="success",
                  command=self.on_add_todo).pack(side=LEFT, padx=(5, 0))
        tb.Button(row, text="Delete", bootstyle="danger",
                  command=self.on_delete_todos).pack(side=LEFT, padx=(5, 0))

    def _build_timer_panel(self):
        frame = tb.Frame(self.root, padding=10)
        frame.pack(fill=X)

        self.timer = CountdownTimer(self.root, on_tick=self._on_timer_tick,
                                    on_finish=self._on_timer_finish,
                                    interval_ms=self.config.tick_ms)
        self.timer_var = StringVar(value=self.timer.display)
        tb.Label(frame, textvariable=self.timer_var,
                 font=("Helvetica", 24)).pack()

        # Buttons
        buttons = tb.Frame(frame)
        buttons.pack(pady=5)
        tb.Button(buttons, text="Start", bootstyle="primary",
                  command=self.on_start).pack(side=LEFT, padx=5)
        tb.Button(buttons, text="Stop", bootstyle="danger",
                  command=self.on_stop).pack(side=LEFT, padx=5)
        tb.Button(buttons, text="Reset", bootstyle="secondary",
                  command=self.on_reset).pack(side=LEFT, padx=5)

        # Stunde / Minute
        pickers = tb.Frame(frame)
        pickers.pack(pady=5)
        tb.Label(pickers, text="Hour").pack(side=LEFT)
        self.hour_var = StringVar(value="0")
        self.minute_var = StringVar(value="0")
        self.hour_sb = tb.Spinbox(pickers, from_=0, to=MAX_HOUR, width=4, wrap=True,
                                  textvariable=self.hour_var, command=self.on_selection_changed)
        self.hour_sb.pack(side=LEFT, padx=(5, 15))
        tb.Label(pickers, text="Minute").pack(side=LEFT)
        self.minute_sb = tb.Spinbox(pickers, from_=0, to=MAX_MINUTE, width=4, wrap=True,
                                    textvariable=self.minute_var, command=self.on_selection_changed)
        self.minute_sb.pack(side=LEFT, padx=5)
        for sb in (self.hour_sb, self.minute_sb):
            sb.bind("<Return>", lambda _e: self.on_selection_changed())
            sb.bind("<FocusOut>", lambda _e: self.on_selection_changed())

    # --- To-do ---

    def on_add_todo(self):
        if self.todos.add(self.todo_var.get()) is not None:
            self._refresh_todos()
        self.todo_var.set("")

    def on_delete_todos(self):
        selection = self.todo_lb.curselection()
        if not selection:
            return
        self.todos.remove(selection)
        self._refresh_todos()

    def _refresh_todos(self):
        self.todo_lb.delete(0, END)
        for title in self.todos.titles():
            self.todo_lb.insert(END, title)

    # --- Timer ---

    def on_selection_changed(self):
        if self.timer.is_running:
            return
        try:
            hour = int(self.hour_var.get())
            minute = int(self.minute_var.get())
        except ValueError:
            # Ungültige Eingabe: letzte gültige Auswahl wiederherstellen
            self._show_selection(self.timer.state)
            return
        hour = min(max(hour, 0), MAX_HOUR)
        minute = min(max(minute, 0), MAX_MINUTE)
        try:
            self.timer.set_duration(hour, minute)
        except TimerRunningError:
            return
        self._show_timer(self.timer.state)

    def on_start(self):
        # Getippte Werte übernehmen; ein Button-Klick löst kein FocusOut aus
        self.on_selection_changed()
        self.timer.start()
        self._set_pickers_state("disabled")

    def on_stop(self):
        self.timer.stop()
        self._set_pickers_state("normal")

    def on_reset(self):
        self.timer.reset()
        self._set_pickers_state("normal")
        self._show_timer(self.timer.state)

    def _on_timer_tick(self, state: CountdownState):
        self._show_timer(state)

    def _on_timer_finish(self):
        self._set_pickers_state("normal")
        self._show_timer(self.timer.state)
        self.root.bell()

    def _show_timer(self, state: CountdownState):
        self.timer_var.set(self.timer.display)
        self._show_selection(state)

    def _show_selection(self, state: CountdownState):
        # Über die Variablen, auch wenn die Spinboxen gesperrt sind;
        # set() löst kein command aus, also keine Rückkopplung zum Timer
        self.hour_var.set(str(state.selected_hour))
        self.minute_var.set(str(state.selected_minute))

    def _set_pickers_state(self, value: str):
        self.hour_sb.configure(state=value)
        self.minute_sb.configure(state=value)

    # --- Lebenszyklus ---

    def on_close(self):
        # Keine after-Jobs über das Fenster hinaus
        self.clock.stop()
        self.timer.reset()
        self.logger.removeHandler(self._text_handler)
        self.root.destroy()

    def run(self):
        self.root.mainloop()
