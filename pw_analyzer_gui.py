#!/usr/bin/env python3
"""
pw_analyzer_gui.py

Password Analyzer — Tkinter GUI

Features:
- Strength score (0-100), label and per-factor breakdown
- Colored progress bar
- Secure password generator (length >= 6) with copy to clipboard

Security notes:
- Everything runs locally; the raw password is never saved or sent anywhere.
"""

import tkinter as tk
from tkinter import ttk, messagebox

from passwordchecker import (
    InvalidLengthError, MIN_LENGTH, evaluate, generate, parse_length,
)

DEFAULT_GEN_LENGTH = 12

BREAKDOWN_ROWS = (
    ("Length", "lengthScore"),
    ("Case", "caseScore"),
    ("Digits", "digitScore"),
    ("Symbols", "symbolScore"),
    ("Patterns", "patternScore"),
)


# -------------------------
# Display helpers
# -------------------------
def score_color(score: int) -> str:
    pct = max(0, min(100, score))
    if pct >= 85:
        return "#2ecc71"
    if pct >= 65:
        return "#9bde67"
    if pct >= 40:
        return "#f1c40f"
    return "#e74c3c"


def breakdown_lines(result: dict) -> list:
    """Human-readable lines for a ScoreResult.to_dict() payload."""
    breakdown = result.get("breakdown", {})
    lines = []
    for title, key in BREAKDOWN_ROWS:
        if key in breakdown:
            lines.append(f"{title}: {breakdown[key]}")
    if breakdown.get("containsCommonPattern"):
        lines.append("Contains a common pattern (e.g. '123', 'password')")
    if breakdown.get("hasRepeatedRun"):
        lines.append("Has a character repeated 3+ times in a row")
    return lines


# -------------------------
# GUI
# -------------------------
class PWAnalyzerGUI(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Password Analyzer")
        self.geometry("560x440")
        self.resizable(False, False)
        self.style = ttk.Style(self)
        self.create_widgets()

    def create_widgets(self):
        pad = {"padx": 8, "pady": 6}

        # Input frame
        frm_in = ttk.LabelFrame(self, text="Enter password to check (local only, not stored)")
        frm_in.pack(fill="x", **pad)
        self.pw_var = tk.StringVar()
        self.pw_entry = ttk.Entry(frm_in, textvariable=self.pw_var, show="*", font=("Segoe UI", 11))
        self.pw_entry.pack(fill="x", padx=10, pady=8)
        self.pw_entry.bind("<Return>", lambda e: self.check_password())

        row = ttk.Frame(frm_in)
        row.pack(fill="x", padx=10, pady=(0, 8))
        self.show_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(row, text="Show password", variable=self.show_var,
                        command=self.toggle_show).pack(side="left")
        ttk.Button(row, text="Clear", command=self.clear).pack(side="right")
        ttk.Button(row, text="Check Strength", command=self.check_password).pack(side="right", padx=(0, 8))

        # Result frame
        frm_res = ttk.Frame(self)
        frm_res.pack(fill="x", padx=12)
        self.label_lbl = ttk.Label(frm_res, text="—", font=("Segoe UI", 12, "bold"))
        self.label_lbl.grid(row=0, column=0, sticky="w")
        self.score_lbl = ttk.Label(frm_res, text="0 / 100")
        self.score_lbl.grid(row=0, column=1, sticky="e", padx=(12, 0))
        self.str_bar = ttk.Progressbar(frm_res, orient="horizontal", length=520,
                                       mode="determinate", maximum=100,
                                       style="Strength.Horizontal.TProgressbar")
        self.str_bar.grid(row=1, column=0, columnspan=2, pady=(8, 0), sticky="w")

        frm_bd = ttk.LabelFrame(self, text="Breakdown")
        frm_bd.pack(fill="both", expand=True, padx=12, pady=(8, 0))
        self.breakdown_text = tk.Text(frm_bd, height=8, wrap="word", state="disabled", padx=8, pady=6)
        self.breakdown_text.pack(fill="both", expand=True)

        # Generator
        frm_gen = ttk.LabelFrame(self, text="Generate a password")
        frm_gen.pack(fill="x", padx=12, pady=10)
        ttk.Label(frm_gen, text="Length:").pack(side="left", padx=(10, 4), pady=8)
        self.len_var = tk.StringVar(value=str(DEFAULT_GEN_LENGTH))
        ttk.Spinbox(frm_gen, from_=MIN_LENGTH, to=128, width=5,
                    textvariable=self.len_var).pack(side="left")
        ttk.Button(frm_gen, text="Generate", command=self.generate_password).pack(side="left", padx=8)
        self.gen_var = tk.StringVar()
        ttk.Entry(frm_gen, textvariable=self.gen_var, state="readonly",
                  font=("Consolas", 11)).pack(side="left", fill="x", expand=True)
        ttk.Button(frm_gen, text="Copy", command=self.copy_generated).pack(side="left", padx=(8, 10))

    def toggle_show(self):
        self.pw_entry.config(show="" if self.show_var.get() else "*")

    def clear(self):
        self.pw_var.set("")
        self.show_result(None)

    def check_password(self):
        self.show_result(evaluate(self.pw_var.get()).to_dict())

    def show_result(self, result):
        self.breakdown_text.config(state="normal")
        self.breakdown_text.delete("1.0", "end")
        if result is None:
            self.label_lbl.config(text="—")
            self.score_lbl.config(text="0 / 100")
            self.str_bar["value"] = 0
        else:
            score = result["score"]
            self.label_lbl.config(text=result["label"])
            self.score_lbl.config(text=f"{score} / 100")
            self.style.configure("Strength.Horizontal.TProgressbar", background=score_color(score))
            self.str_bar["value"] = score
            for line in breakdown_lines(result):
                self.breakdown_text.insert("end", f" - {line}\n")
        self.breakdown_text.config(state="disabled")

    def generate_password(self):
        try:
            pw = generate(parse_length(self.len_var.get()))
        except InvalidLengthError as e:
            messagebox.showerror("Generate", e.message)
            return
        self.gen_var.set(pw)
        self.pw_var.set(pw)
        self.show_result(None)

    def copy_generated(self):
        pw = self.gen_var.get()
        if not pw:
            return
        self.clipboard_clear()
        self.clipboard_append(pw)
        messagebox.showinfo("Copy", "Copied to clipboard")


# -------------------------
# Run
# -------------------------
def main():
    app = PWAnalyzerGUI()
    app.mainloop()

if __name__ == "__main__":
    main()
