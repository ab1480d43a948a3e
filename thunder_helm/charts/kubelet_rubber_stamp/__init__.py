from .config import KubeletRubberStampArgs
from .kubelet_rubber_stamp import KubeletRubberStamp
