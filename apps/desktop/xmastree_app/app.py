"""Desktop app runtime, view-model, and widget layout."""

from __future__ import annotations

import os
import sys
from dataclasses import replace

from PySide6.QtCore import QObject, Property, Qt, Signal, Slot
from PySide6.QtGui import QFont, QIcon, QPixmap
from PySide6.QtWidgets import QApplication, QLabel, QPushButton, QSlider, QVBoxLayout, QWidget

from xmastree_core import AppConfig, ParameterStore, load_config
from xmastree_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from xmastree_renderer import DEFAULT_PARAMETERS, RenderParameters

from .canvas import TreeCanvas
from .controls import SliderRange, ornament_label, scale_label


class TreeViewModel(QObject):
    treeScaleChanged = Signal()
    ornamentSizeChanged = Signal()
    treeScaleTextChanged = Signal()
    ornamentSizeTextChanged = Signal()
    paramsChanged = Signal()

    def __init__(self, store: ParameterStore | None = None) -> None:
        super().__init__()
        self.logger = get_logger()
        self.store = store or ParameterStore()
        self._params = self.store.snapshot
        self._tree_scale_text = scale_label(self._params.tree_scale)
        self._ornament_size_text = ornament_label(self._params.ornament_size)
        self.store.bind(self._on_params)

    @Property(float, notify=treeScaleChanged)
    def treeScale(self) -> float:
        return self._params.tree_scale

    @Property(float, notify=ornamentSizeChanged)
    def ornamentSize(self) -> float:
        return self._params.ornament_size

    @Property(str, notify=treeScaleTextChanged)
    def treeScaleText(self) -> str:
        return self._tree_scale_text

    @Property(str, notify=ornamentSizeTextChanged)
    def ornamentSizeText(self) -> str:
        return self._ornament_size_text

    @property
    def params(self) -> RenderParameters:
        return self._params

    def _set_text(self, field: str, value: str, signal: Signal) -> None:
        if getattr(self, field) != value:
            setattr(self, field, value)
            signal.emit()

    def _on_params(self, params: RenderParameters) -> None:
        previous = self._params
        self._params = params
        if params.tree_scale != previous.tree_scale:
            self.treeScaleChanged.emit()
        if params.ornament_size != previous.ornament_size:
            self.ornamentSizeChanged.emit()
        self._set_text("_tree_scale_text", scale_label(params.tree_scale), self.treeScaleTextChanged)
        self._set_text("_ornament_size_text", ornament_label(params.ornament_size), self.ornamentSizeTextChanged)
        self.paramsChanged.emit()

    @Slot(float)
    def setTreeScale(self, value: float) -> None:
        self.store.set_tree_scale(value)

    @Slot(float)
    def setOrnamentSize(self, value: float) -> None:
        self.store.set_ornament_size(value)

    @Slot()
    def randomizeOrnamentColor(self) -> None:
        self.store.randomize_ornament_color()
        self.logger.info(
            f"ornament color {self._params.ornament_color.hex}", extra={"event": "ornament_color_changed"}
        )

    @Slot()
    def randomizeLightColor(self) -> None:
        self.store.randomize_light_color()
        self.logger.info(f"light color {self._params.light_color.hex}", extra={"event": "light_color_changed"})

    def shutdown(self) -> None:
        self.store.unbind()


def _slider(span: SliderRange, value: float, on_value) -> QSlider:
    slider = QSlider(Qt.Orientation.Horizontal)
    slider.setRange(0, span.steps)
    # Position first, connect after: an out-of-range default stays in the store until the user drags.
    slider.setValue(span.to_position(value))
    slider.valueChanged.connect(lambda position: on_value(span.to_value(position)))
    return slider


def tree_icon() -> QIcon:
    from PIL.ImageQt import ImageQt

    from xmastree_renderer import render_image

    params = replace(DEFAULT_PARAMETERS, tree_scale=1.2, ornament_size=8.0)
    image = render_image(params, 256, 256)
    return QIcon(QPixmap.fromImage(ImageQt(image)))


class ConfiguratorWindow(QWidget):
    def __init__(self, vm: TreeViewModel, config: AppConfig) -> None:
        super().__init__()
        self.vm = vm
        self.config = config
        self.setWindowTitle(config.window.title)
        self.resize(config.window.width, config.window.canvas_height + 260)

        layout = QVBoxLayout(self)
        pad = config.window.padding
        layout.setContentsMargins(pad, pad, pad, pad)

        header = QLabel(config.window.title)
        font = QFont()
        font.setPointSize(24)
        header.setFont(font)
        layout.addWidget(header)
        layout.addSpacing(pad)

        sliders = config.sliders
        self.scale_label = QLabel(vm.treeScaleText)
        layout.addWidget(self.scale_label)
        self.scale_slider = _slider(
            SliderRange(sliders.scale_min, sliders.scale_max, sliders.steps), vm.treeScale, vm.setTreeScale
        )
        layout.addWidget(self.scale_slider)

        self.ornament_label = QLabel(vm.ornamentSizeText)
        layout.addWidget(self.ornament_label)
        self.ornament_slider = _slider(
            SliderRange(sliders.ornament_min, sliders.ornament_max, sliders.steps),
            vm.ornamentSize,
            vm.setOrnamentSize,
        )
        layout.addWidget(self.ornament_slider)

        ornament_button = QPushButton("Change ornament color")
        ornament_button.clicked.connect(vm.randomizeOrnamentColor)
        layout.addWidget(ornament_button, alignment=Qt.AlignmentFlag.AlignLeft)

        light_button = QPushButton("Change light color")
        light_button.clicked.connect(vm.randomizeLightColor)
        layout.addWidget(light_button, alignment=Qt.AlignmentFlag.AlignLeft)

        layout.addSpacing(pad)
        self.canvas = TreeCanvas(vm.store, height=config.window.canvas_height)
        layout.addWidget(self.canvas)
        layout.addStretch(1)

        vm.treeScaleTextChanged.connect(lambda: self.scale_label.setText(vm.treeScaleText))
        vm.ornamentSizeTextChanged.connect(lambda: self.ornament_label.setText(vm.ornamentSizeText))
        # update() coalesces, so a burst of slider moves paints once with the latest snapshot.
        vm.paramsChanged.connect(self.canvas.update)


def run_gui() -> int:
    config = load_config()
    configure_logging(keep_files=config.diagnostics.keep_log_files, console=config.diagnostics.console_log)
    install_crash_hooks()
    logger = get_logger()

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.PassThrough)

    app = QApplication(sys.argv)
    app.setApplicationName("XmasTree")
    app.setApplicationDisplayName(config.window.title)

    vm = TreeViewModel()
    try:
        window = ConfiguratorWindow(vm, config)
    except Exception:
        logger.exception("failed to build main window", extra={"event": "window_failed"})
        return 1
    try:
        icon = tree_icon()
    except (ImportError, OSError, ValueError) as exc:
        logger.warning(f"window icon unavailable: {exc}", extra={"event": "icon_failed"})
    else:
        app.setWindowIcon(icon)
        window.setWindowIcon(icon)
    window.show()

    exit_code = app.exec()
    vm.shutdown()
    logger.info("app shutdown", extra={"event": "shutdown", "exit_code": int(exit_code)})
    return int(exit_code)
