"""
サウンドタイマー用のブザー。

サウンドタイマーが0でない間、正弦波のトーンを QAudioSink で再生します。
"""
import logging
import math
from array import array

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QObject
from PySide6.QtMultimedia import QAudio, QAudioFormat, QAudioSink, QMediaDevices

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
TONE_SECONDS = 1.0

# @intent:utility_function 16bit モノラルの正弦波 PCM データを生成します。
def tone_samples(frequency: int, volume: float, sample_rate: int = SAMPLE_RATE, seconds: float = TONE_SECONDS) -> bytes:
    amplitude = int(32767 * volume)
    count = int(sample_rate * seconds)
    samples = array("h", (
        int(amplitude * math.sin(2.0 * math.pi * frequency * n / sample_rate)) for n in range(count)
    ))
    return samples.tobytes()

# @intent:responsibility サウンドタイマーの状態に追従してトーンの再生/停止を切り替えます。
class Beeper(QObject):
    def __init__(self, frequency: int, volume: float, parent=None):
        super().__init__(parent)
        self._sink = None
        self._playing = False
        self._buffer = QBuffer(self)
        self._tone = QByteArray(tone_samples(frequency, volume))

        device = QMediaDevices.defaultAudioOutput()
        if device.isNull():
            logger.warning("No audio output device available; sound is disabled.")
            return

        fmt = QAudioFormat()
        fmt.setSampleRate(SAMPLE_RATE)
        fmt.setChannelCount(1)
        fmt.setSampleFormat(QAudioFormat.SampleFormat.Int16)
        self._sink = QAudioSink(device, fmt, self)

    @property
    def available(self) -> bool:
        return self._sink is not None

    # @intent:responsibility active が True の間はトーンを鳴らし続け、False になったら停止します。
    def set_active(self, active: bool) -> None:
        if not self.available:
            return
        if active:
            # トーンを再生し切ってアイドルになった場合も再開する
            if not self._playing or self._sink.state() == QAudio.State.IdleState:
                self._start()
        elif self._playing:
            self.stop()

    def _start(self) -> None:
        self._sink.stop()
        self._buffer.close()
        self._buffer.setData(self._tone)
        self._buffer.open(QIODevice.ReadOnly)
        self._sink.start(self._buffer)
        self._playing = True

    def stop(self) -> None:
        if self._sink is not None:
            self._sink.stop()
        self._playing = False
