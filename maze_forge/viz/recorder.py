import logging
import os
from datetime import datetime

import cv2
import numpy as np
import pygame

logger = logging.getLogger(__name__)


class VideoRecorder:
    """
    Writes rendered frames to an MP4 file through OpenCV.

    The writer opens on the first captured frame, so the video takes the
    size of the window it records. Later frames of another size are scaled.
    """

    FOURCC = 'mp4v'

    def __init__(self, output_file: str, fps: int = 30):
        self.output_file = output_file
        self.fps = fps
        self.writer = None
        self.frame_size = None
        self.frame_count = 0

    @classmethod
    def for_run(cls, algorithm_id: str, width: int, height: int, directory: str = "recordings",
                fps: int = 30, now: datetime = None) -> "VideoRecorder":
        """Recorder named after the run, e.g. recordings/gen_prims_20x20_20240101_120000.mp4"""
        os.makedirs(directory, exist_ok=True)
        stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
        fname = f"gen_{algorithm_id}_{width}x{height}_{stamp}.mp4"
        return cls(os.path.join(directory, fname), fps=fps)

    @property
    def recording(self) -> bool:
        return self.writer is not None

    def _open(self, frame_size):
        writer = cv2.VideoWriter(self.output_file, cv2.VideoWriter_fourcc(*self.FOURCC), self.fps, frame_size)
        if not writer.isOpened():
            raise OSError(f"Could not open video writer for {self.output_file}")
        self.writer = writer
        self.frame_size = frame_size
        logger.info(f"Recording started: {self.output_file} {frame_size[0]}x{frame_size[1]} @ {self.fps} fps")

    def capture_frame(self, surface: pygame.Surface):
        if self.writer is None:
            self._open(surface.get_size())

        # surfarray is (width, height, 3) RGB, OpenCV wants (height, width, 3) BGR
        rgb = np.ascontiguousarray(np.transpose(pygame.surfarray.array3d(surface), (1, 0, 2)))
        frame = cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)
        if surface.get_size() != self.frame_size:
            frame = cv2.resize(frame, self.frame_size, interpolation=cv2.INTER_NEAREST)

        self.writer.write(frame)
        self.frame_count += 1

    def stop(self) -> int:
        """Finalizes the file. Returns the number of frames written."""
        if self.writer is not None:
            self.writer.release()
            self.writer = None
            logger.info(f"Video saved: {self.output_file} ({self.frame_count} frames)")
        return self.frame_count
