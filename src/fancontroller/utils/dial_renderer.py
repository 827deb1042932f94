"""
Dial rendering utilities for the Fan Controller.

Draws the dial face, the selection indicator and the four speed labels onto a
QPainter, using a DialRenderConfig derived from the main application configuration.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QColor, QFont, QFontMetricsF, QPainter

from fancontroller import constants
from fancontroller.core.fan_speed import FanSpeed
from fancontroller.core.geometry import indicator_radius, label_radius, position_for

logger = logging.getLogger("FanController.DialRenderer")


@dataclass
class DialRenderConfig:
    """A data class holding a snapshot of all configuration relevant to rendering."""
    off_color: str
    on_color: str
    indicator_color: str
    label_color: str
    font_family: str
    label_font_size: int
    font_weight: int

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'DialRenderConfig':
        """Creates a DialRenderConfig instance from a standard application config dictionary."""
        defaults = constants.config.defaults
        try:
            weight = int(config.get('font_weight', defaults.DEFAULT_FONT_WEIGHT))
            if not 1 <= weight <= 1000:
                logger.warning("Invalid font_weight %s, using default.", weight)
                weight = defaults.DEFAULT_FONT_WEIGHT

            render_config = cls(
                off_color=config.get('off_color', constants.color.DIAL_OFF_COLOR),
                on_color=config.get('on_color', constants.color.DIAL_ON_COLOR),
                indicator_color=config.get('indicator_color', constants.color.INDICATOR_COLOR),
                label_color=config.get('label_color', constants.color.LABEL_COLOR),
                font_family=str(config.get('font_family') or defaults.DEFAULT_FONT_FAMILY),
                label_font_size=int(config.get('label_font_size', defaults.DEFAULT_LABEL_FONT_SIZE)),
                font_weight=weight,
            )
            for name in ('off_color', 'on_color', 'indicator_color', 'label_color'):
                value = getattr(render_config, name)
                if not (isinstance(value, str) and QColor(value).isValid()):
                    raise ValueError(f"{name} is not a valid color: {value!r}")
            if render_config.label_font_size < 1:
                raise ValueError(f"label_font_size must be positive, got {render_config.label_font_size}")
            return render_config
        except (TypeError, ValueError) as e:
            logger.error("Failed to create DialRenderConfig: %s", e)
            raise ValueError("Invalid rendering configuration") from e


class DialRenderer:
    """
    Renders the fan dial: a filled face, a marker at the selected speed and a
    label at each of the four speed slots.
    """
    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.logger = logger
        self.config = DialRenderConfig.from_dict(config or constants.config.defaults.DEFAULT_CONFIG)
        self.off_color = QColor(self.config.off_color)
        self.on_color = QColor(self.config.on_color)
        self.indicator_color = QColor(self.config.indicator_color)
        self.label_color = QColor(self.config.label_color)
        self.font = self._build_font(self.config)
        self.metrics = QFontMetricsF(self.font)
        self.logger.debug("DialRenderer initialized.")

    @staticmethod
    def _build_font(config: DialRenderConfig) -> QFont:
        family = config.font_family or QFont().family()
        font = QFont(family, -1, config.font_weight)
        font.setPixelSize(config.label_font_size)
        return font

    def fill_color_for(self, speed: FanSpeed) -> QColor:
        """Gray while the fan is off, green at any running speed."""
        return QColor(self.off_color) if speed is FanSpeed.OFF else QColor(self.on_color)

    def draw_dial(self, painter: QPainter, speed: FanSpeed, center: QPointF, radius: float,
                  labels: Mapping[FanSpeed, str]) -> None:
        """Draws the complete dial for `speed` centred on `center`."""
        painter.save()
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setPen(Qt.PenStyle.NoPen)

            painter.setBrush(self.fill_color_for(speed))
            painter.drawEllipse(center, radius, radius)

            marker = position_for(speed, center, indicator_radius(radius))
            marker_size = radius / constants.dial.INDICATOR_RADIUS_DIVISOR
            painter.setBrush(self.indicator_color)
            painter.drawEllipse(marker, marker_size, marker_size)

            self._draw_labels(painter, center, radius, labels)
        except Exception as e:
            self.logger.error("Failed to draw dial: %s", e, exc_info=True)
        finally:
            painter.restore()

    def _draw_labels(self, painter: QPainter, center: QPointF, radius: float,
                     labels: Mapping[FanSpeed, str]) -> None:
        """Draws each speed's label horizontally centred on its slot; the slot is the baseline."""
        painter.setFont(self.font)
        painter.setPen(self.label_color)
        for speed in FanSpeed:
            text = labels.get(speed, "")
            if not text:
                continue
            point = position_for(speed, center, label_radius(radius))
            half_width = self.metrics.horizontalAdvance(text) / 2.0
            painter.drawText(QPointF(point.x() - half_width, point.y()), text)
