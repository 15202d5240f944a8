import io
import subprocess

import pytest
from rich.console import Console

LINUX_NETSTAT = """\
Kernel IP routing table
Destination     Gateway         Genmask         Flags   MSS Window  irtt Iface
0.0.0.0         192.168.1.1     0.0.0.0         UG        0 0          0 eth0
172.17.0.0      0.0.0.0         255.255.0.0     U         0 0          0 docker0
192.168.1.0     0.0.0.0         255.255.255.0   U         0 0          0 eth0
"""

MACOS_NETSTAT = """\
Routing tables

Internet:
Destination        Gateway            Flags               Netif Expire
default            192.168.1.1        UGScg                 en0
127                127.0.0.1          UCS                   lo0
192.168.1          link#6             UCS                   en0      !
192.168.1.1        a4:2b:b0:11:22:33  UHLWIir               en0   1192

Internet6:
Destination                             Gateway                         Flags               Netif Expire
default                                 fe80::%utun0                    UGcIg               utun0
::1                                     ::1                             UHL                   lo0
fe80::%lo0/64                           fe80::1%lo0                     UcI                   lo0
"""


def completed(stdout=b"", stderr=b"", returncode=0, args=("netstat", "-rn")):
    return subprocess.CompletedProcess(list(args), returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def linux_output():
    return LINUX_NETSTAT


@pytest.fixture
def macos_output():
    return MACOS_NETSTAT


@pytest.fixture
def capture_console():
    """A plain, wide Console writing into a StringIO (read back with .file.getvalue())."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)
