"""PCM wave format description and sample buffers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

WAVE_FORMAT_PCM = 1
DEFAULT_SAMPLE_SIZE = 2


@dataclass(frozen=True)
class WaveFormat:
    """Description of a PCM stream."""

    format_tag: int = WAVE_FORMAT_PCM
    channels: int = 0
    samples_per_sec: int = 0
    avg_bytes_per_sec: int = 0
    block_align: int = 0
    bits_per_sample: int = 0


def build_format(channels: int, frequency: int, bits: int) -> WaveFormat:
    """Build the PCM format for the given channel count, rate and sample width."""
    return WaveFormat(
        format_tag=WAVE_FORMAT_PCM,
        channels=channels,
        samples_per_sec=frequency,
        avg_bytes_per_sec=frequency * channels * bits // 8,
        block_align=channels * bits // 8,
        bits_per_sample=bits,
    )


@dataclass
class WaveBuffer:
    """A block of raw samples of a fixed size in bytes."""

    data: bytearray | None = None
    num_samples: int = 0
    sample_size: int = 0

    def set_num_samples(self, num_samples: int, sample_size: int = DEFAULT_SAMPLE_SIZE) -> None:
        """Replace the buffer with a zeroed one holding ``num_samples`` samples."""
        if num_samples < 0:
            raise ValueError("number of samples must not be negative")
        if sample_size <= 0:
            raise ValueError("sample size must be positive")
        self.set_buffer(bytearray(num_samples * sample_size), num_samples, sample_size)

    def set_buffer(self, data: bytearray, num_samples: int, sample_size: int) -> None:
        """Take ``data`` as the buffer without copying a bytearray."""
        if num_samples < 0:
            raise ValueError("number of samples must not be negative")
        if not sample_size:
            raise ValueError("sample size must not be zero")
        self.data = data if isinstance(data, bytearray) else bytearray(data)
        self.num_samples = num_samples
        self.sample_size = sample_size

    def copy_buffer(
        self, data: bytes, num_samples: int, sample_size: int = DEFAULT_SAMPLE_SIZE
    ) -> None:
        """Copy samples from ``data`` into the buffer.

        A buffer that does not exist yet is created to fit. At most as many
        samples as the buffer holds are copied; the rest is zeroed.
        """
        if num_samples < 0:
            raise ValueError("number of samples must not be negative")
        if not sample_size:
            raise ValueError("sample size must not be zero")
        if self.data is None:
            self.set_num_samples(num_samples, sample_size)

        count = min(self.num_samples, num_samples) * sample_size
        if count > 0:
            if len(data) < count:
                raise ValueError("source holds fewer bytes than requested")
            self.data[:] = bytes(self.num_samples * self.sample_size)
            self.data[:count] = data[:count]


@dataclass
class Wave:
    """A PCM format together with its sample buffer."""

    format: WaveFormat = field(default_factory=WaveFormat)
    buffer: WaveBuffer = field(default_factory=WaveBuffer)

    def build_format(self, channels: int, frequency: int, bits: int) -> None:
        """Set a new PCM format and empty the buffer."""
        self.format = build_format(channels, frequency, bits)
        self.buffer.set_num_samples(0, self.format.block_align)

    @property
    def data(self) -> bytearray | None:
        return self.buffer.data

    @property
    def num_samples(self) -> int:
        return self.buffer.num_samples

    @property
    def buffer_length(self) -> int:
        """Length of the samples in bytes."""
        return self.buffer.num_samples * self.format.block_align

    def set_buffer(self, data: bytes, num_samples: int, copy: bool = False) -> None:
        """Attach ``data`` as the samples, copying it when ``copy`` is true."""
        if not data:
            raise ValueError("no sample data given")
        if num_samples <= 0:
            raise ValueError("number of samples must be positive")
        if self.format.block_align <= 0:
            raise ValueError("format has no block alignment")
        if copy:
            self.buffer.copy_buffer(data, num_samples, self.format.block_align)
        else:
            self.buffer.set_buffer(data, num_samples, self.format.block_align)

    def copy(self) -> Wave:
        """Return an independent copy of this wave."""
        clone = Wave(format=replace(self.format))
        align = self.format.block_align
        if align > 0:
            clone.buffer.set_num_samples(self.num_samples, align)
            if self.data is not None:
                clone.buffer.copy_buffer(self.data, self.num_samples, align)
        return clone

    __copy__ = copy