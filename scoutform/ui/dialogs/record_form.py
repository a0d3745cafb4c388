from __future__ import annotations

from typing import Optional

from PySide6 import QtCore, QtWidgets

from ... import config
from ...app_services.form_codec import FormFields, format_second_scale, snap_second_scale


def _second_scale_ticks() -> int:
    return int(round((config.SECOND_SCALE_MAX - config.SECOND_SCALE_MIN) / config.SECOND_SCALE_STEP))


class RecordFormDialog(QtWidgets.QDialog):
    """Modal add/edit form. Only reads and writes FormFields; never touches the store."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None, is_edit: bool = False) -> None:
        super().__init__(parent)
        self.setWindowTitle("Edit Record" if is_edit else "Add Record")
        self.setModal(True)

        root = QtWidgets.QVBoxLayout(self)

        # Basic Info
        basic = QtWidgets.QGroupBox("Basic Info")
        form = QtWidgets.QFormLayout(basic)

        self.edit_name = QtWidgets.QLineEdit()
        self.combo_option = QtWidgets.QComboBox()
        self.combo_option.addItems(list(config.ROBOT_TYPES) + [config.OPTION_OTHER])
        self.edit_custom = QtWidgets.QLineEdit()

        self.slider_scale = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.slider_scale.setRange(config.SCALE_MIN, config.SCALE_MAX)
        self.slider_scale.setSingleStep(config.SCALE_STEP)
        self.slider_scale.setPageStep(config.SCALE_STEP)
        self.lbl_scale = QtWidgets.QLabel()

        # Quarter-foot ticks mapped onto an integer slider
        self.slider_second = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.slider_second.setRange(0, _second_scale_ticks())
        self.slider_second.setSingleStep(1)
        self.slider_second.setPageStep(1)
        self.lbl_second = QtWidgets.QLabel()

        self.chk_yes_or_no = QtWidgets.QCheckBox(config.LABEL_YES_OR_NO)
        self.chk_second_yes_or_no = QtWidgets.QCheckBox(config.LABEL_SECOND_YES_OR_NO)

        form.addRow(f"{config.LABEL_NAME}:", self.edit_name)
        form.addRow(f"{config.LABEL_OPTION}:", self.combo_option)
        form.addRow(f"{config.LABEL_CUSTOM_OPTION}:", self.edit_custom)
        form.addRow(f"{config.LABEL_SCALE}:", self.slider_scale)
        form.addRow("", self.lbl_scale)
        form.addRow("Distance:", self.slider_second)
        form.addRow("", self.lbl_second)
        form.addRow(self.chk_yes_or_no)
        form.addRow(self.chk_second_yes_or_no)
        self._basic_form = form

        # Practice Scores
        scores = QtWidgets.QGroupBox("Practice Scores")
        scores_layout = QtWidgets.QVBoxLayout(scores)
        self.edit_numbers = QtWidgets.QLineEdit()
        self.edit_numbers.setPlaceholderText(config.NUMBER_LIST_PLACEHOLDER)
        scores_layout.addWidget(self.edit_numbers)

        # Additional Info
        info = QtWidgets.QGroupBox("Additional Info")
        info_layout = QtWidgets.QVBoxLayout(info)
        self.edit_info = QtWidgets.QLineEdit()
        self.edit_info.setPlaceholderText(config.ADDITIONAL_INFO_PLACEHOLDER)
        info_layout.addWidget(self.edit_info)

        btns = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Save | QtWidgets.QDialogButtonBox.Cancel)
        btns.accepted.connect(self.accept)
        btns.rejected.connect(self.reject)

        root.addWidget(basic)
        root.addWidget(scores)
        # Shown only when Save is refused
        self.lbl_error = QtWidgets.QLabel()
        self.lbl_error.setStyleSheet("color: #c0392b;")
        self.lbl_error.setVisible(False)

        root.addWidget(info)
        root.addWidget(self.lbl_error)
        root.addWidget(btns)

        # Wire interactions
        self.combo_option.currentTextChanged.connect(self._on_option_changed)
        self.slider_scale.valueChanged.connect(self._update_scale_label)
        self.slider_second.valueChanged.connect(self._update_second_label)

        self.set_fields(FormFields())

    def _set_custom_visible(self, visible: bool) -> None:
        self.edit_custom.setVisible(visible)
        label = self._basic_form.labelForField(self.edit_custom)
        if label is not None:
            label.setVisible(visible)

    def accept(self) -> None:
        error = self.get_fields().validation_error()
        if error:
            self.lbl_error.setText(error)
            self.lbl_error.setVisible(True)
            self.edit_custom.setFocus()
            return
        self.lbl_error.setVisible(False)
        super().accept()

    def _on_option_changed(self, text: str) -> None:
        self._set_custom_visible(text == config.OPTION_OTHER)

    def _update_scale_label(self, value: int) -> None:
        self.lbl_scale.setText(f"{config.LABEL_SCALE}: {int(value)}")

    def _update_second_label(self, _ticks: int) -> None:
        self.lbl_second.setText(f"{config.LABEL_SECOND_SCALE}: {format_second_scale(self._second_scale_value())}")

    def _second_scale_value(self) -> float:
        return config.SECOND_SCALE_MIN + self.slider_second.value() * config.SECOND_SCALE_STEP

    def set_fields(self, fields: FormFields) -> None:
        self.edit_name.setText(fields.name)
        idx = self.combo_option.findText(fields.option)
        if idx < 0:
            idx = self.combo_option.findText(config.OPTION_OTHER)
        self.combo_option.setCurrentIndex(idx)
        self.edit_custom.setText(fields.custom_option)
        self._set_custom_visible(self.combo_option.currentText() == config.OPTION_OTHER)

        self.slider_scale.setValue(int(round(fields.scale)))
        second = snap_second_scale(fields.second_scale)
        self.slider_second.setValue(int(round((second - config.SECOND_SCALE_MIN) / config.SECOND_SCALE_STEP)))
        self._update_scale_label(self.slider_scale.value())
        self._update_second_label(self.slider_second.value())

        self.chk_yes_or_no.setChecked(bool(fields.yes_or_no))
        self.chk_second_yes_or_no.setChecked(bool(fields.second_yes_or_no))
        self.edit_numbers.setText(fields.number_list_text)
        self.edit_info.setText(fields.additional_info)

    def get_fields(self) -> FormFields:
        return FormFields(
            name=self.edit_name.text(),
            option=self.combo_option.currentText(),
            custom_option=self.edit_custom.text(),
            scale=float(self.slider_scale.value()),
            second_scale=self._second_scale_value(),
            additional_info=self.edit_info.text(),
            yes_or_no=bool(self.chk_yes_or_no.isChecked()),
            second_yes_or_no=bool(self.chk_second_yes_or_no.isChecked()),
            number_list_text=self.edit_numbers.text(),
        )
