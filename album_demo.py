import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from album_core import LayoutOptions, Photo, compute_layout
from album_core.units import format_px

PHOTOS = [
    Photo(1080, 800),
    Photo(1080, 1620),
    Photo(1080, 720),
    Photo(1080, 1440),
    Photo(1080, 1080),
    Photo(1920, 1080),
    Photo(1080, 1620),
    Photo(1080, 607),
    Photo(1080, 1350),
    Photo(1080, 720),
    Photo(800, 1080),
    Photo(1080, 1080),
]


def place_rows(album, options):
    y = 0.0
    for row in album.groups:
        x = 0.0
        for entry in row:
            yield x + options.padding, y + options.padding, entry.layout.width, entry.layout.height
            x += entry.layout.width + 2 * options.padding + options.spacing
        y += row[0].layout.height + 2 * options.padding + options.spacing


def place_columns(album, options):
    x = 0.0
    for column, width in zip(album.groups, album.columns_widths):
        y = 0.0
        for entry in column:
            yield x + options.padding, y + options.padding, entry.layout.width, entry.layout.height
            y += entry.layout.height + 2 * options.padding + options.spacing
        x += width + 2 * options.padding + options.spacing


def plot_album(ax, album, options, title):
    placer = place_rows if album.kind == "rows" else place_columns
    bottom = 0.0
    for idx, (x, y, w, h) in enumerate(placer(album, options)):
        color = "tab:blue" if idx % 2 == 0 else "tab:orange"
        ax.add_patch(Rectangle((x, y), w, h, facecolor=color, edgecolor="black", alpha=0.5))
        bottom = max(bottom, y + h)
    ax.add_patch(
        Rectangle((0, 0), options.container_width, bottom, fill=False, edgecolor="black", linewidth=2)
    )
    ax.set_xlim(-20, options.container_width + 20)
    ax.set_ylim(bottom + 20, -20)
    ax.set_aspect("equal")
    ax.set_title(f"{title}\nGroups: {len(album.groups)}, width {format_px(options.container_width, 0)}")


def main():
    options = LayoutOptions(
        container_width=1000, spacing=10, padding=2, target_row_height=220, columns=3
    )

    fig, axes = plt.subplots(1, 3, figsize=(18, 7))
    for ax, kind in zip(axes, ("rows", "columns", "masonry")):
        album = compute_layout(PHOTOS, options, layout=kind)
        if album is None:
            ax.set_title(f"{kind}: no layout")
            continue
        plot_album(ax, album, options, kind.capitalize())
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
