import random

import matplotlib.patches as patches
import matplotlib.pyplot as plt
import matplotlib.widgets as widgets
import numpy as np
import requests

from rover.entities.fleet import random_start
from rover.utils.consts import API_TIMEOUT, API_URL, FRAMES_PER_COMMAND, GRID_SIZE, MAX_TICKS
from rover.utils.errors import RoverError

# Heading letter → drawing angle in degrees (0 = +x axis, counter-clockwise)
HEADING_ANGLE = {"N": 90, "E": 0, "S": -90, "W": 180}
HEADING_NAMES = {"N": "NORTH", "E": "EAST", "S": "SOUTH", "W": "WEST"}


# =============================================================================
# PURE HELPERS
# =============================================================================

def heading_angle(d):
    return HEADING_ANGLE[d]


def generate_frames(raw_path, frames_per_command=FRAMES_PER_COMMAND):
    """
    Convert a list of {x, y, d} states into dense animation frames.
    Moves slide linearly, turns rotate in place along the shorter direction.
    Produces (len(raw_path) - 1) * frames_per_command + 1 frames.
    """
    frames = []
    if not raw_path:
        return frames

    for i in range(len(raw_path) - 1):
        p1, p2 = raw_path[i], raw_path[i + 1]
        a1 = heading_angle(p1['d'])
        turn = ((heading_angle(p2['d']) - a1 + 180) % 360) - 180
        dx, dy = p2['x'] - p1['x'], p2['y'] - p1['y']
        for t in np.linspace(0, 1, frames_per_command, endpoint=False):
            frames.append({
                'x': float(p1['x'] + dx * t),
                'y': float(p1['y'] + dy * t),
                'angle': float(a1 + turn * t),
            })

    last = raw_path[-1]
    frames.append({'x': float(last['x']), 'y': float(last['y']), 'angle': float(heading_angle(last['d']))})
    return frames


def view_bounds(raw_path, min_size=GRID_SIZE):
    """Axis limits (xmin, xmax, ymin, ymax) showing the whole path, never smaller than min_size."""
    if not raw_path:
        return 0, min_size, 0, min_size
    xs = [p['x'] for p in raw_path]
    ys = [p['y'] for p in raw_path]
    return (
        min(min(xs) - 1, 0), max(max(xs) + 2, min_size),
        min(min(ys) - 1, 0), max(max(ys) + 2, min_size),
    )


def grid_ticks(lo, hi, max_ticks=MAX_TICKS):
    """One tick per cell on small grids; every n-th cell once the span exceeds max_ticks."""
    stride = max(1, -(-(hi - lo) // max_ticks))
    return range(lo, hi + 1, stride)


def fetch_path(start, instructions, api_url=API_URL):
    """
    POST /run on the rover server.

    Raises:
        RoverError: the server rejected the start or instruction string (HTTP 400)
        requests.RequestException: connection problems or other HTTP errors
    """
    res = requests.post(
        f"{api_url}/run",
        json={"start": start, "instructions": instructions},
        timeout=API_TIMEOUT,
    )
    if res.status_code == 400:
        raise RoverError(res.json().get("detail", res.text))
    res.raise_for_status()
    return res.json()


# =============================================================================
# DASHBOARD
# =============================================================================

class RoverDashboard:

    def __init__(self, api_url=API_URL):
        self.api_url = api_url

        # --- Path state ---
        self.raw_path = []             # List of {x, y, d} returned by /run
        self.frames = []               # Interpolated playback frames
        self.final = None
        self.compressed = []

        # --- Playback state ---
        self.current_frame = 0
        self.is_playing = False

        # ---- BUILD FIGURE ----
        self.fig, self.ax = plt.subplots(figsize=(9, 10))
        plt.subplots_adjust(bottom=0.28)

        self.timer = self.fig.canvas.new_timer(interval=60)
        self.timer.add_callback(self.play_step)

        # --- Row 1: Inputs ---
        self.box_start = widgets.TextBox(plt.axes([0.12, 0.17, 0.20, 0.05]), 'Start ', initial="1 2 N")
        self.box_instructions = widgets.TextBox(
            plt.axes([0.48, 0.17, 0.40, 0.05]), 'Instructions ', initial="LMLMLMLMM"
        )

        # --- Row 2: Playback controls ---
        self.btn_prev = widgets.Button(plt.axes([0.05, 0.09, 0.12, 0.06]), '<< Prev')
        self.btn_prev.on_clicked(self.prev_step)

        self.btn_play = widgets.Button(plt.axes([0.19, 0.09, 0.12, 0.06]), 'Play', color='lightgreen')
        self.btn_play.on_clicked(self.toggle_play)

        self.btn_next = widgets.Button(plt.axes([0.33, 0.09, 0.12, 0.06]), 'Next >>')
        self.btn_next.on_clicked(self.next_step)

        self.btn_run = widgets.Button(plt.axes([0.50, 0.09, 0.14, 0.06]), 'Run', color='lightblue')
        self.btn_run.on_clicked(self.run_simulation)

        self.btn_random = widgets.Button(plt.axes([0.66, 0.09, 0.14, 0.06]), 'Random', color='#FFD700')
        self.btn_random.on_clicked(self.randomize_start)

        self.btn_clear = widgets.Button(plt.axes([0.82, 0.09, 0.12, 0.06]), 'Clear', color='salmon')
        self.btn_clear.on_clicked(self.clear_all)

        self.ax_status = plt.axes([0.05, 0.02, 0.90, 0.05])
        self.ax_status.axis('off')
        self.status_text = self.ax_status.text(
            0, 0.5, "Status: ready",
            transform=self.ax_status.transAxes,
            va='center', fontsize=8.5, color='gray',
            wrap=True
        )

        self.redraw()
        plt.show()

    # =========================================================================
    # PLAYBACK
    # =========================================================================

    def toggle_play(self, event):
        if not self.frames: return
        if self.is_playing:
            self.stop_playback()
        else:
            if self.current_frame >= len(self.frames) - 1:
                self.current_frame = 0
            self.is_playing = True
            self.btn_play.label.set_text('Pause')
            self.timer.start()

    def stop_playback(self):
        self.is_playing = False
        self.btn_play.label.set_text('Play')
        self.timer.stop()
        self.fig.canvas.draw_idle()

    def play_step(self):
        if self.current_frame < len(self.frames) - 1:
            self.current_frame += 1
            self.redraw()
        else:
            self.stop_playback()

    def prev_step(self, event):
        self.stop_playback()
        if self.current_frame > 0:
            self.current_frame -= 1
            self.redraw()

    def next_step(self, event):
        self.stop_playback()
        if self.frames and self.current_frame < len(self.frames) - 1:
            self.current_frame += 1
            self.redraw()

    # =========================================================================
    # RUN  (/run call)
    # =========================================================================

    def run_simulation(self, event):
        start = self.box_start.text.strip()
        instructions = self.box_instructions.text.strip()
        self._set_status(f"Running '{instructions}' from '{start}'...", "orange")
        self.fig.canvas.draw()

        try:
            data = fetch_path(start, instructions, self.api_url)
        except RoverError as e:
            self._set_status(f"Rejected: {e}", "red")
            self.fig.canvas.draw_idle()
            return
        except requests.RequestException as e:
            self._set_status(f"Connection failed: {e}", "red")
            self.fig.canvas.draw_idle()
            return

        self.stop_playback()
        self.raw_path = data['path']
        self.final = data['final']
        self.compressed = data['instructions']
        self.frames = generate_frames(self.raw_path)
        self.current_frame = 0
        self._set_status(f"Final state {self.final} after {len(self.raw_path) - 1} commands.", "blue")
        self.redraw()

    def randomize_start(self, event):
        self.box_start.set_val(random_start(rng=random.Random()))
        self.reset_path()

    def reset_path(self):
        self.stop_playback()
        self.raw_path = []
        self.frames = []
        self.final = None
        self.compressed = []
        self.current_frame = 0
        self._set_status("Ready: enter a start state and instructions, then click Run", "gray")
        self.redraw()

    def _set_status(self, msg, color="gray"):
        self.status_text.set_text(f"{msg}")
        self.status_text.set_color(color)

    def clear_all(self, event):
        self.box_instructions.set_val("")
        self.reset_path()

    # =========================================================================
    # REDRAW
    # =========================================================================

    def _draw_path_lines(self):
        """Trail between consecutive cells, coloured by progress."""
        for i in range(len(self.raw_path) - 1):
            p1, p2 = self.raw_path[i], self.raw_path[i + 1]
            if (p1['x'], p1['y']) == (p2['x'], p2['y']):
                continue  # turn in place
            color = plt.cm.winter(i / max(len(self.raw_path) - 1, 1))
            self.ax.plot(
                [p1['x'] + 0.5, p2['x'] + 0.5], [p1['y'] + 0.5, p2['y'] + 0.5],
                color=color, alpha=0.6, linewidth=2, zorder=1
            )

    def redraw(self):
        self.ax.clear()
        xmin, xmax, ymin, ymax = view_bounds(self.raw_path)
        self.ax.set_xlim(xmin, xmax)
        self.ax.set_ylim(ymin, ymax)
        self.ax.set_xticks(grid_ticks(xmin, xmax))
        self.ax.set_yticks(grid_ticks(ymin, ymax))
        self.ax.set_aspect('equal')
        self.ax.grid(True, linestyle=':', alpha=0.6)

        frame_info = (
            f"Frame {self.current_frame}/{len(self.frames) - 1}"
            if self.frames else "Setup Mode"
        )
        title = frame_info
        if self.final is not None:
            title += f"\nFinal: {self.final} | {' '.join(self.compressed)}"
        self.ax.set_title(title, fontsize=9)

        if self.raw_path:
            self._draw_path_lines()
            start = self.raw_path[0]
            self.ax.add_patch(patches.Rectangle(
                (start['x'], start['y']), 1, 1, color='lightgreen', alpha=0.5, zorder=0
            ))
            self.ax.text(
                start['x'] + 0.5, start['y'] - 0.3, f"START {HEADING_NAMES[start['d']]}",
                ha='center', fontsize=7, color='green'
            )

        # ---- Active rover ----
        if self.frames:
            f = self.frames[self.current_frame]
            fx, fy, fa = f['x'] + 0.5, f['y'] + 0.5, f['angle']
            self.ax.add_patch(patches.Circle((fx, fy), 0.35, color='gray', alpha=0.7, ec='black', zorder=10))
            adx = 0.6 * np.cos(np.radians(fa))
            ady = 0.6 * np.sin(np.radians(fa))
            self.ax.arrow(fx, fy, adx, ady, color='blue', width=0.06, head_width=0.2, zorder=11)

        self.fig.canvas.draw()


if __name__ == "__main__":
    dashboard = RoverDashboard()
