# widgets/utils.py
from io import BytesIO

from PIL import Image, ImageDraw, ImageOps
from PySide6.QtGui import QImage, QPixmap


def decode_image(data: bytes) -> Image.Image:
    image = Image.open(BytesIO(data))
    image.load()
    return image


def circular_image(pil_image: Image.Image, size: int) -> Image.Image:
    """居中裁剪成正方形并加圆形遮罩，可在后台线程执行"""
    square = ImageOps.fit(pil_image.convert("RGBA"), (size, size), method=Image.Resampling.LANCZOS)
    mask = Image.new("L", (size, size), 0)
    ImageDraw.Draw(mask).ellipse((0, 0, size - 1, size - 1), fill=255)
    square.putalpha(mask)
    return square


def pil_to_qpixmap(pil_image: Image.Image) -> QPixmap:
    # QPixmap 只能在 UI 线程创建
    if pil_image.mode != "RGBA":
        pil_image = pil_image.convert("RGBA")

    data = pil_image.tobytes("raw", "RGBA")
    width, height = pil_image.size

    qimage = QImage(data, width, height, width * 4, QImage.Format.Format_RGBA8888)
    # fromImage 会复制数据，data 之后可以释放
    return QPixmap.fromImage(qimage)


def placeholder_pixmap(size: int, color: str) -> QPixmap:
    image = Image.new("RGBA", (size, size), color)
    return pil_to_qpixmap(circular_image(image, size))
