#!/usr/bin/env python3
"""
Scale Track Remover - GUI Version
Batch panel for removing scale curves from Unity .anim clips.

Clip files passed on the command line (e.g. files dropped onto the
executable) are added to the list on startup.
"""

import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from pathlib import Path
import threading
import sys

from core import BatchStatus, PARTIAL_SUCCESS_TITLE
from scale_track_remover import ScaleTrackRemover, VERSION


class ScaleTrackRemoverGUI:
    """GUI Application"""

    def __init__(self, root, initial_paths=None):
        self.root = root
        self.root.title(f"Remove Scale Curves v{VERSION}")
        self.root.geometry("650x760")
        self.root.resizable(False, False)

        # Grayscale theme colors
        self.colors = {
            'bg': '#2a2a2a',           # Dark gray background
            'bg_light': '#3a3a3a',     # Slightly lighter gray
            'accent': '#4a4a4a',       # Medium gray accent
            'highlight': '#7a7a7a',    # Light gray highlight
            'text': '#ffffff',         # White text for better visibility
            'text_dim': '#a0a0a0',     # Dimmed gray text
            'entry_bg': '#1a1a1a',     # Very dark gray entry background
            'entry_text': '#ffffff',   # White text in entries
            'button_bg': '#555555',    # Medium-dark gray button
            'button_hover': '#666666', # Lighter gray on hover
            'button_text': '#ffffff',  # White button text
        }

        self.root.configure(bg=self.colors['bg'])

        # Variables
        self.clips = []
        self.clip_count = tk.StringVar(value="Clips selected: 0")
        self.backup = tk.BooleanVar(value=False)
        self.running = False

        # One remover for the whole session so the last batch can be undone
        self.remover = ScaleTrackRemover(progress_callback=self.log_threadsafe)

        self.setup_theme()
        self.setup_ui()

        if initial_paths:
            self.add_paths(initial_paths)

    def setup_theme(self):
        """Configure dark theme for ttk widgets"""
        style = ttk.Style()

        style.configure('Dark.TFrame', background=self.colors['bg'])

        style.configure('Dark.TLabel',
                       background=self.colors['bg'],
                       foreground=self.colors['text'],
                       font=('Segoe UI', 9))
        style.configure('Bold.TLabel',
                       background=self.colors['bg'],
                       foreground=self.colors['text'],
                       font=('Segoe UI', 10, 'bold'))
        style.configure('Title.TLabel',
                       background=self.colors['bg'],
                       foreground=self.colors['highlight'],
                       font=('Segoe UI', 18, 'bold'))
        style.configure('Subtitle.TLabel',
                       background=self.colors['bg'],
                       foreground=self.colors['text_dim'],
                       font=('Segoe UI', 10))

        style.configure('Dark.TCheckbutton',
                       background=self.colors['bg'],
                       foreground=self.colors['text'],
                       font=('Segoe UI', 9))
        style.map('Dark.TCheckbutton',
                 background=[('active', self.colors['bg'])])

        style.configure('Dark.TLabelframe',
                       background=self.colors['bg'],
                       foreground=self.colors['text'],
                       borderwidth=1,
                       relief='solid')
        style.configure('Dark.TLabelframe.Label',
                       background=self.colors['bg'],
                       foreground=self.colors['highlight'],
                       font=('Segoe UI', 10, 'bold'))

        style.configure('Dark.Horizontal.TProgressbar',
                       background=self.colors['highlight'],
                       troughcolor=self.colors['accent'],
                       borderwidth=0,
                       thickness=8)

    def _button(self, parent, text, command, large=False):
        """Flat button in the dark theme"""
        if large:
            return tk.Button(parent, text=text, command=command,
                             bg=self.colors['button_bg'], fg=self.colors['button_text'],
                             activebackground=self.colors['button_hover'],
                             activeforeground=self.colors['button_text'],
                             relief='flat', borderwidth=0, padx=30, pady=12,
                             font=('Segoe UI', 12, 'bold'), cursor='hand2')

        return tk.Button(parent, text=text, command=command,
                         bg=self.colors['accent'], fg=self.colors['button_text'],
                         activebackground=self.colors['bg_light'],
                         activeforeground=self.colors['button_text'],
                         relief='flat', borderwidth=0, padx=15, pady=5, cursor='hand2')

    def setup_ui(self):
        """Create the user interface"""
        title = ttk.Label(self.root, text="Batch Remove Scale Curves", style='Title.TLabel')
        title.pack(pady=(25, 5))

        subtitle = ttk.Label(self.root,
                             text="Add AnimationClips (.anim) to batch remove scale (m_LocalScale) properties",
                             style='Subtitle.TLabel')
        subtitle.pack(pady=(0, 15))

        main_frame = ttk.Frame(self.root, padding="20", style='Dark.TFrame')
        main_frame.pack(fill=tk.BOTH, expand=False)

        # Clip list
        clips_frame = ttk.LabelFrame(main_frame, text="Animation Clips", padding="5",
                                     style='Dark.TLabelframe')
        clips_frame.grid(row=0, column=0, columnspan=2, sticky=(tk.W, tk.E), pady=5)

        self.clip_list = tk.Listbox(clips_frame, height=10, width=70, selectmode=tk.EXTENDED,
                                    bg=self.colors['entry_bg'], fg=self.colors['entry_text'],
                                    selectbackground=self.colors['highlight'],
                                    relief='flat', borderwidth=0, font=('Consolas', 9))
        self.clip_list.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        list_scrollbar = ttk.Scrollbar(clips_frame, command=self.clip_list.yview)
        list_scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.clip_list.config(yscrollcommand=list_scrollbar.set)

        # List actions
        actions = ttk.Frame(main_frame, style='Dark.TFrame')
        actions.grid(row=1, column=0, columnspan=2, sticky=tk.W, pady=5)

        self._button(actions, "Add Clips...", self.browse_clips).pack(side=tk.LEFT, padx=(0, 5))
        self._button(actions, "Add Folder...", self.browse_folder).pack(side=tk.LEFT, padx=5)
        self._button(actions, "Remove From List", self.remove_selected).pack(side=tk.LEFT, padx=5)
        self._button(actions, "Clear Selection", self.clear_clips).pack(side=tk.LEFT, padx=5)

        ttk.Label(main_frame, textvariable=self.clip_count, style='Bold.TLabel').grid(
            row=2, column=0, sticky=tk.W, pady=5)

        ttk.Checkbutton(main_frame, text="Keep .bak copies of modified clips",
                        variable=self.backup, style='Dark.TCheckbutton').grid(
            row=2, column=1, sticky=tk.E, pady=5)

        # Run / undo
        run_frame = ttk.Frame(main_frame, style='Dark.TFrame')
        run_frame.grid(row=3, column=0, columnspan=2, pady=15)

        self.remove_btn = self._button(run_frame, "Remove Scale From Selected Clips",
                                       self.start_removal, large=True)
        self.remove_btn.pack(side=tk.LEFT, padx=5)

        self.undo_btn = self._button(run_frame, "Undo Last Batch", self.undo_last)
        self.undo_btn.pack(side=tk.LEFT, padx=5)
        self.undo_btn.config(state='disabled')

        self.progress = ttk.Progressbar(main_frame, mode='indeterminate',
                                        style='Dark.Horizontal.TProgressbar')
        self.progress.grid(row=4, column=0, columnspan=2, sticky=(tk.W, tk.E), pady=5)

        # Log text area
        log_frame = ttk.LabelFrame(main_frame, text="Progress Log", padding="5",
                                   style='Dark.TLabelframe')
        log_frame.grid(row=5, column=0, columnspan=2, sticky=(tk.W, tk.E, tk.N, tk.S), pady=10)

        self.log_text = tk.Text(log_frame, height=12, width=63, wrap=tk.WORD,
                                bg=self.colors['entry_bg'],
                                fg=self.colors['entry_text'],
                                insertbackground=self.colors['entry_text'],
                                font=('Consolas', 9),
                                relief='flat',
                                borderwidth=0)
        self.log_text.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        scrollbar = ttk.Scrollbar(log_frame, command=self.log_text.yview)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.log_text.config(yscrollcommand=scrollbar.set)

    # ------------------------------------------------------------------
    # Clip list
    # ------------------------------------------------------------------

    def add_paths(self, paths):
        """Add clips from files/folders, skipping ones already listed"""
        clips = self.remover.collect(paths)
        added = 0
        for clip in clips:
            if clip in self.clips:
                continue
            self.clips.append(clip)
            self.clip_list.insert(tk.END, str(clip))
            added += 1

        if added:
            self.log(f"Added {added} clip(s)")
        self.update_count()

    def browse_clips(self):
        """Browse for .anim files"""
        filenames = filedialog.askopenfilenames(
            title="Select Animation Clips",
            filetypes=[("Animation Clips", "*.anim"), ("All Files", "*.*")]
        )
        if filenames:
            self.add_paths(filenames)

    def browse_folder(self):
        """Browse for a folder and add every clip below it"""
        directory = filedialog.askdirectory(title="Select Folder With Animation Clips")
        if directory:
            self.add_paths([directory])

    def remove_selected(self):
        """Drop highlighted clips from the list"""
        for index in reversed(self.clip_list.curselection()):
            self.clip_list.delete(index)
            del self.clips[index]
        self.update_count()

    def clear_clips(self):
        self.clips = []
        self.clip_list.delete(0, tk.END)
        self.update_count()

    def update_count(self):
        self.clip_count.set(f"Clips selected: {len(self.clips)}")

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(self, message):
        """Add message to log text area"""
        self.log_text.insert(tk.END, message + "\n")
        self.log_text.see(tk.END)

    def log_threadsafe(self, message):
        """Log from the worker thread via the Tk event loop"""
        self.root.after(0, self.log, message)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def set_busy(self, busy):
        self.running = busy
        state = 'disabled' if busy else 'normal'
        self.remove_btn.config(state=state, bg=self.colors['accent'] if busy else self.colors['button_bg'])
        self.undo_btn.config(state='disabled' if busy or not self.remover.can_undo else 'normal')
        if busy:
            self.progress.start()
        else:
            self.progress.stop()

    def start_removal(self):
        """Confirm, then run the batch in a separate thread"""
        if self.running:
            return

        if not self.clips:
            messagebox.showerror("No Animation Clips Selected",
                                 "Please select one or more .anim files to remove scale tracks from.")
            return

        if not messagebox.askyesno("Remove Scale Tracks", self.remover.confirm_message(self.clips)):
            return

        self.log_text.delete(1.0, tk.END)
        self.remover.store.backup = self.backup.get()
        self.set_busy(True)

        thread = threading.Thread(target=self.run_removal, args=(list(self.clips),))
        thread.daemon = True
        thread.start()

    def run_removal(self, clips):
        """Run the actual removal"""
        try:
            results = self.remover.remove_scale_tracks(clips)
            self.root.after(0, self.show_results, results)
        finally:
            self.root.after(0, self.set_busy, False)

    def show_results(self, results):
        if not results['success']:
            messagebox.showerror("Error", results['message'])
        elif results['status'] == BatchStatus.SUCCESS:
            messagebox.showinfo("Remove Scale Tracks", results['message'])
        elif results['report'].total_clips:
            messagebox.showwarning(PARTIAL_SUCCESS_TITLE, results['message'])

    def undo_last(self):
        if self.running or not self.remover.can_undo:
            return

        results = self.remover.undo_last()
        if results['success']:
            messagebox.showinfo("Undo", results['message'])
        else:
            messagebox.showerror("Undo", results['message'])
        self.set_busy(False)


def main():
    root = tk.Tk()
    app = ScaleTrackRemoverGUI(root, initial_paths=[p for p in sys.argv[1:] if Path(p).exists()])
    root.mainloop()


if __name__ == "__main__":
    main()
