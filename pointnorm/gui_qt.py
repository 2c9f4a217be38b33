from __future__ import annotations

import sys
from typing import Optional

from pyvistaqt import QtInteractor

from PySide6 import QtCore, QtWidgets

from .core import DEFAULT_COLOR, NormalizationResult, normalize_point_file
from .exceptions import PointNormError
from .viewer import ViewStyle, add_point_cloud


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, path: Optional[str] = None) -> None:
        super().__init__()
        self.setWindowTitle("pointnorm — Robust Point Normalizer")
        self.resize(1400, 800)

        self._result: Optional[NormalizationResult] = None
        self.style = ViewStyle(background="white")
        self._link_views = True
        self._syncing = False

        self._build_ui()
        self._install_camera_sync()
        self._refresh_views()

        if path:
            self.load(path)

    # ---------- UI ----------
    def _build_ui(self) -> None:
        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        root = QtWidgets.QHBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(8)

        splitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Horizontal)
        root.addWidget(splitter, 1)

        self.view_left = QtInteractor(self)
        self.view_right = QtInteractor(self)
        splitter.addWidget(self.view_left.interactor)
        splitter.addWidget(self.view_right.interactor)
        splitter.setSizes([700, 700])

        panel = QtWidgets.QFrame()
        panel.setFrameShape(QtWidgets.QFrame.Shape.StyledPanel)
        panel.setMinimumWidth(300)
        root.addWidget(panel, 0)

        v = QtWidgets.QVBoxLayout(panel)
        v.setContentsMargins(10, 10, 10, 10)
        v.setSpacing(8)

        row = QtWidgets.QHBoxLayout()
        self.btn_load = QtWidgets.QPushButton("Load points…")
        self.btn_reset = QtWidgets.QPushButton("Reset view")
        row.addWidget(self.btn_load)
        row.addWidget(self.btn_reset)
        v.addLayout(row)

        v.addWidget(_hline())

        form = QtWidgets.QFormLayout()
        self.spn_point_size = QtWidgets.QDoubleSpinBox()
        self.spn_point_size.setRange(1.0, 20.0)
        self.spn_point_size.setValue(self.style.point_size)
        form.addRow("Point size", self.spn_point_size)
        v.addLayout(form)

        self.chk_axes = QtWidgets.QCheckBox("Show axes")
        self.chk_axes.setChecked(self.style.show_axes)
        self.chk_link = QtWidgets.QCheckBox("Link views")
        self.chk_link.setChecked(self._link_views)
        v.addWidget(self.chk_axes)
        v.addWidget(self.chk_link)

        v.addWidget(_hline())

        self.lbl_path = QtWidgets.QLabel("No file loaded.")
        self.lbl_path.setWordWrap(True)
        self.lbl_count = QtWidgets.QLabel("Points: —")
        self.lbl_center = QtWidgets.QLabel("Center: —")
        self.lbl_extents = QtWidgets.QLabel("Extents: —")
        self.lbl_scale = QtWidgets.QLabel("Scale: —")
        for w in (self.lbl_path, self.lbl_count, self.lbl_center, self.lbl_extents, self.lbl_scale):
            v.addWidget(w)
        v.addStretch(1)

        self.status = QtWidgets.QLabel("Ready.")
        self.statusBar().addWidget(self.status, 1)

        self.btn_load.clicked.connect(self.on_load)
        self.btn_reset.clicked.connect(self.on_reset_view)
        self.spn_point_size.valueChanged.connect(self.on_style_changed)
        self.chk_axes.toggled.connect(self.on_style_changed)
        self.chk_link.toggled.connect(self.on_style_changed)

    # ---------- Camera sync ----------
    def _install_camera_sync(self) -> None:
        self.view_left.camera.AddObserver("ModifiedEvent", self._on_left_camera)
        self.view_right.camera.AddObserver("ModifiedEvent", self._on_right_camera)

    def _copy_camera(self, src: QtInteractor, dst: QtInteractor) -> None:
        # Avoid loops
        if self._syncing or not self._link_views:
            return
        self._syncing = True
        try:
            dst.camera_position = src.camera_position
            dst.render()
        finally:
            self._syncing = False

    def _on_left_camera(self, *args) -> None:
        self._copy_camera(self.view_left, self.view_right)

    def _on_right_camera(self, *args) -> None:
        self._copy_camera(self.view_right, self.view_left)

    # ---------- Plot updating ----------
    def _refresh_views(self) -> None:
        for view in (self.view_left, self.view_right):
            view.clear()
            view.set_background(self.style.background)

        self.view_left.add_text("Original", font_size=12)
        self.view_right.add_text("Normalized", font_size=12)

        if self._result is not None:
            add_point_cloud(self.view_left, self._result.original, DEFAULT_COLOR, self.style)
            add_point_cloud(self.view_right, self._result.normalized, DEFAULT_COLOR, self.style)
        else:
            self.view_right.add_text("Load a point file to view", position="lower_left", font_size=10)

        for view in (self.view_left, self.view_right):
            if self.style.show_axes:
                view.add_axes()
            else:
                view.hide_axes()
            view.render()

    # ---------- Slots ----------
    def load(self, path: str) -> None:
        self.status.setText("Loading points...")
        try:
            res = normalize_point_file(path)
        except PointNormError as e:
            QtWidgets.QMessageBox.critical(self, "Load failed", str(e))
            self.status.setText("Load failed.")
            return

        self._result = res
        c = res.center
        ext = res.stats.extents
        self.lbl_path.setText(f"Loaded: {path}")
        self.lbl_count.setText(f"Points: {len(res)}")
        self.lbl_center.setText(f"Center: [{c[0]: .6g}, {c[1]: .6g}, {c[2]: .6g}]")
        self.lbl_extents.setText(f"Extents: [{ext[0]: .6g}, {ext[1]: .6g}, {ext[2]: .6g}]")
        self.lbl_scale.setText(f"Scale: {res.scale:.6g}")

        self._refresh_views()
        self.on_reset_view()
        self.status.setText("Loaded and normalized.")

    @QtCore.Slot()
    def on_load(self) -> None:
        path, _ = QtWidgets.QFileDialog.getOpenFileName(
            self,
            "Open point file",
            "",
            "Point files (*.txt *.xyz);;All files (*.*)",
        )
        if not path:
            return
        self.load(path)

    @QtCore.Slot()
    def on_reset_view(self) -> None:
        for view in (self.view_left, self.view_right):
            view.reset_camera()
            view.render()

    @QtCore.Slot()
    def on_style_changed(self) -> None:
        self.style.point_size = float(self.spn_point_size.value())
        self.style.show_axes = self.chk_axes.isChecked()
        self._link_views = self.chk_link.isChecked()
        self._refresh_views()
        if self._link_views and self._result is not None:
            self._copy_camera(self.view_left, self.view_right)

    def closeEvent(self, event) -> None:
        self.view_left.close()
        self.view_right.close()
        super().closeEvent(event)


def _hline() -> QtWidgets.QFrame:
    ln = QtWidgets.QFrame()
    ln.setFrameShape(QtWidgets.QFrame.Shape.HLine)
    ln.setFrameShadow(QtWidgets.QFrame.Shadow.Sunken)
    return ln


def main(path: Optional[str] = None) -> None:
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    win = MainWindow(path)
    win.show()
    app.exec()


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
