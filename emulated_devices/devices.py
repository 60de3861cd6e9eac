# Device emulation definitions for use with emulated_devices.emulation.
#
# See: https://raw.githubusercontent.com/puppeteer/puppeteer/main/src/common/DeviceDescriptors.ts
#
# Generated by gen.py. DO NOT EDIT.

from enum import IntEnum

from emulated_devices.info import Info


class Device(IntEnum):
    """Device provides the enumerated device type."""

    def __str__(self):
        return DEVICES[self].name

    def device(self) -> Info:
        return DEVICES[self]

    # Reset is the reset device.
    Reset = 0

    # BlackberryPlayBook is the 'Blackberry PlayBook' device.
    BlackberryPlayBook = 1

    # BlackberryPlayBooklandscape is the 'Blackberry PlayBook landscape' device.
    BlackberryPlayBooklandscape = 2

    # BlackBerryZ30 is the 'BlackBerry Z30' device.
    BlackBerryZ30 = 3

    # BlackBerryZ30landscape is the 'BlackBerry Z30 landscape' device.
    BlackBerryZ30landscape = 4

    # GalaxyNote3 is the 'Galaxy Note 3' device.
    GalaxyNote3 = 5

    # GalaxyNote3landscape is the 'Galaxy Note 3 landscape' device.
    GalaxyNote3landscape = 6

    # GalaxyNoteII is the 'Galaxy Note II' device.
    GalaxyNoteII = 7

    # GalaxyNoteIIlandscape is the 'Galaxy Note II landscape' device.
    GalaxyNoteIIlandscape = 8

    # GalaxySIII is the 'Galaxy S III' device.
    GalaxySIII = 9

    # GalaxySIIIlandscape is the 'Galaxy S III landscape' device.
    GalaxySIIIlandscape = 10

    # GalaxyS5 is the 'Galaxy S5' device.
    GalaxyS5 = 11

    # GalaxyS5landscape is the 'Galaxy S5 landscape' device.
    GalaxyS5landscape = 12

    # IPad is the 'iPad' device.
    IPad = 13

    # IPadlandscape is the 'iPad landscape' device.
    IPadlandscape = 14

    # IPadMini is the 'iPad Mini' device.
    IPadMini = 15

    # IPadMinilandscape is the 'iPad Mini landscape' device.
    IPadMinilandscape = 16

    # IPadPro is the 'iPad Pro' device.
    IPadPro = 17

    # IPadProlandscape is the 'iPad Pro landscape' device.
    IPadProlandscape = 18

    # IPhone4 is the 'iPhone 4' device.
    IPhone4 = 19

    # IPhone4landscape is the 'iPhone 4 landscape' device.
    IPhone4landscape = 20

    # IPhone5 is the 'iPhone 5' device.
    IPhone5 = 21

    # IPhone5landscape is the 'iPhone 5 landscape' device.
    IPhone5landscape = 22

    # IPhone6 is the 'iPhone 6' device.
    IPhone6 = 23

    # IPhone6landscape is the 'iPhone 6 landscape' device.
    IPhone6landscape = 24

    # IPhone6Plus is the 'iPhone 6 Plus' device.
    IPhone6Plus = 25

    # IPhone6Pluslandscape is the 'iPhone 6 Plus landscape' device.
    IPhone6Pluslandscape = 26

    # IPhoneX is the 'iPhone X' device.
    IPhoneX = 27

    # IPhoneXlandscape is the 'iPhone X landscape' device.
    IPhoneXlandscape = 28

    # Nexus5 is the 'Nexus 5' device.
    Nexus5 = 29

    # Nexus5landscape is the 'Nexus 5 landscape' device.
    Nexus5landscape = 30

    # Pixel2 is the 'Pixel 2' device.
    Pixel2 = 31

    # Pixel2landscape is the 'Pixel 2 landscape' device.
    Pixel2landscape = 32

    # Pixel2XL is the 'Pixel 2 XL' device.
    Pixel2XL = 33

    # Pixel2XLlandscape is the 'Pixel 2 XL landscape' device.
    Pixel2XLlandscape = 34


# DEVICES is the list of devices, indexed by Device.
DEVICES = (
    Info("", "", 0, 0, 0.0, False, False, False),
    Info(
        "Blackberry PlayBook",
        "Mozilla/5.0 (PlayBook; U; RIM Tablet OS 2.1.0; en-US) AppleWebKit/536.2+ (KHTML like Gecko) Version/7.2.1.0 Safari/536.2+",
        600,
        1024,
        1.0,
        False,
        True,
        True,
    ),
    Info(
        "Blackberry PlayBook landscape",
        "Mozilla/5.0 (PlayBook; U; RIM Tablet OS 2.1.0; en-US) AppleWebKit/536.2+ (KHTML like Gecko) Version/7.2.1.0 Safari/536.2+",
        1024,
        600,
        1.0,
        True,
        True,
        True,
    ),
    Info(
        "BlackBerry Z30",
        "Mozilla/5.0 (BB10; Touch) AppleWebKit/537.10+ (KHTML, like Gecko) Version/10.0.9.2372 Mobile Safari/537.10+",
        360,
        640,
        2.0,
        False,
        True,
        True,
    ),
    Info(
        "BlackBerry Z30 landscape",
        "Mozilla/5.0 (BB10; Touch) AppleWebKit/537.10+ (KHTML, like Gecko) Version/10.0.9.2372 Mobile Safari/537.10+",
        640,
        360,
        2.0,
        True,
        True,
        True,
    ),
    Info(
        "Galaxy Note 3",
        "Mozilla/5.0 (Linux; U; Android 4.3; en-us; SM-N900T Build/JSS15J) AppleWebKit/534.30 (KHTML, like Gecko) Version/4.0 Mobile Safari/534.30",
        360,
        640,
        3.0,
        False,
        True,
        True,
    ),
    Info(
        "Galaxy Note 3 landscape",
        "Mozilla/5.0 (Linux; U; Android 4.3; en-us; SM-N900T Build/JSS15J) AppleWebKit/534.30 (KHTML, like Gecko) Version/4.0 Mobile Safari/534.30",
        640,
        360,
        3.0,
        True,
        True,
        True,
    ),
    Info(
        "Galaxy Note II",
        "Mozilla/5.0 (Linux; U; Android 4.1; en-us; GT-N7100 Build/JRO03C) AppleWebKit/534.30 (KHTML, like Gecko) Version/4.0 Mobile Safari/534.30",
        360,
        640,
        2.0,
        False,
        True,
        True,
    ),
    Info(
        "Galaxy Note II landscape",
        "Mozilla/5.0 (Linux; U; Android 4.1; en-us; GT-N7100 Build/JRO03C) AppleWebKit/534.30 (KHTML, like Gecko) Version/4.0 Mobile Safari/534.30",
        640,
        360,
        2.0,
        True,
        True,
        True,
    ),
    Info(
        "Galaxy S III",
        "Mozilla/5.0 (Linux; U; Android 4.0; en-us; GT-I9300 Build/IMM76D) AppleWebKit/534.30 (KHTML, like Gecko) Version/4.0 Mobile Safari/534.30",
        360,
        640,
        2.0,
        False,
        True,
        True,
    ),
    Info(
        "Galaxy S III landscape",
        "Mozilla/5.0 (Linux; U; Android 4.0; en-us; GT-I9300 Build/IMM76D) AppleWebKit/534.30 (KHTML, like Gecko) Version/4.0 Mobile Safari/534.30",
        640,
        360,
        2.0,
        True,
        True,
        True,
    ),
    Info(
        "Galaxy S5",
        "Mozilla/5.0 (Linux; Android 5.0; SM-G900P Build/LRX21T) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/75.0.3765.0 Mobile Safari/537.36",
        360,
        640,
        3.0,
        False,
        True,
        True,
    ),
    Info(
        "Galaxy S5 landscape",
        "Mozilla/5.0 (Linux; Android 5.0; SM-G900P Build/LRX21T) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/75.0.3765.0 Mobile Safari/537.36",
        640,
        360,
        3.0,
        True,
        True,
        True,
    ),
    Info(
        "iPad",
        "Mozilla/5.0 (iPad; CPU OS 11_0 like Mac OS X) AppleWebKit/604.1.34 (KHTML, like Gecko) Version/11.0 Mobile/15A5341f Safari/604.1",
        768,
        1024,
        2.0,
        False,
        True,
        True,
    ),
    Info(
        "iPad landscape",
        "Mozilla/5.0 (iPad; CPU OS 11_0 like Mac OS X) AppleWebKit/604.1.34 (KHTML, like Gecko) Version/11.0 Mobile/15A5341f Safari/604.1",
        1024,
        768,
        2.0,
        True,
        True,
        True,
    ),
    Info(
        "iPad Mini",
        "Mozilla/5.0 (iPad; CPU OS 11_0 like Mac OS X) AppleWebKit/604.1.34 (KHTML, like Gecko) Version/11.0 Mobile/15A5341f Safari/604.1",
        768,
        1024,
        2.0,
        False,
        True,
        True,
    ),
    Info(
        "iPad Mini landscape",
        "Mozilla/5.0 (iPad; CPU OS 11_0 like Mac OS X) AppleWebKit/604.1.34 (KHTML, like Gecko) Version/11.0 Mobile/15A5341f Safari/604.1",
        1024,
        768,
        2.0,
        True,
        True,
        True,
    ),
    Info(
        "iPad Pro",
        "Mozilla/5.0 (iPad; CPU OS 11_0 like Mac OS X) AppleWebKit/604.1.34 (KHTML, like Gecko) Version/11.0 Mobile/15A5341f Safari/604.1",
        1024,
        1366,
        2.0,
        False,
        True,
        True,
    ),
    Info(
        "iPad Pro landscape",
        "Mozilla/5.0 (iPad; CPU OS 11_0 like Mac OS X) AppleWebKit/604.1.34 (KHTML, like Gecko) Version/11.0 Mobile/15A5341f Safari/604.1",
        1366,
        1024,
        2.0,
        True,
        True,
        True,
    ),
    Info(
        "iPhone 4",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 7_1_2 like Mac OS X) AppleWebKit/537.51.2 (KHTML, like Gecko) Version/7.0 Mobile/11D257 Safari/9537.53",
        320,
        480,
        2.0,
        False,
        True,
        True,
    ),
    Info(
        "iPhone 4 landscape",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 7_1_2 like Mac OS X) AppleWebKit/537.51.2 (KHTML, like Gecko) Version/7.0 Mobile/11D257 Safari/9537.53",
        480,
        320,
        2.0,
        True,
        True,
        True,
    ),
    Info(
        "iPhone 5",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 10_3_1 like Mac OS X) AppleWebKit/603.1.30 (KHTML, like Gecko) Version/10.0 Mobile/14E304 Safari/602.1",
        320,
        568,
        2.0,
        False,
        True,
        True,
    ),
    Info(
        "iPhone 5 landscape",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 10_3_1 like Mac OS X) AppleWebKit/603.1.30 (KHTML, like Gecko) Version/10.0 Mobile/14E304 Safari/602.1",
        568,
        320,
        2.0,
        True,
        True,
        True,
    ),
    Info(
        "iPhone 6",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 11_0 like Mac OS X) AppleWebKit/604.1.38 (KHTML, like Gecko) Version/11.0 Mobile/15A372 Safari/604.1",
        375,
        667,
        2.0,
        False,
        True,
        True,
    ),
    Info(
        "iPhone 6 landscape",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 11_0 like Mac OS X) AppleWebKit/604.1.38 (KHTML, like Gecko) Version/11.0 Mobile/15A372 Safari/604.1",
        667,
        375,
        2.0,
        True,
        True,
        True,
    ),
    Info(
        "iPhone 6 Plus",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 11_0 like Mac OS X) AppleWebKit/604.1.38 (KHTML, like Gecko) Version/11.0 Mobile/15A372 Safari/604.1",
        414,
        736,
        3.0,
        False,
        True,
        True,
    ),
    Info(
        "iPhone 6 Plus landscape",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 11_0 like Mac OS X) AppleWebKit/604.1.38 (KHTML, like Gecko) Version/11.0 Mobile/15A372 Safari/604.1",
        736,
        414,
        3.0,
        True,
        True,
        True,
    ),
    Info(
        "iPhone X",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 11_0 like Mac OS X) AppleWebKit/604.1.38 (KHTML, like Gecko) Version/11.0 Mobile/15A372 Safari/604.1",
        375,
        812,
        3.0,
        False,
        True,
        True,
    ),
    Info(
        "iPhone X landscape",
        "Mozilla/5.0 (iPhone; CPU iPhone OS 11_0 like Mac OS X) AppleWebKit/604.1.38 (KHTML, like Gecko) Version/11.0 Mobile/15A372 Safari/604.1",
        812,
        375,
        3.0,
        True,
        True,
        True,
    ),
    Info(
        "Nexus 5",
        "Mozilla/5.0 (Linux; Android 6.0; Nexus 5 Build/MRA58N) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/75.0.3765.0 Mobile Safari/537.36",
        360,
        640,
        3.0,
        False,
        True,
        True,
    ),
    Info(
        "Nexus 5 landscape",
        "Mozilla/5.0 (Linux; Android 6.0; Nexus 5 Build/MRA58N) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/75.0.3765.0 Mobile Safari/537.36",
        640,
        360,
        3.0,
        True,
        True,
        True,
    ),
    Info(
        "Pixel 2",
        "Mozilla/5.0 (Linux; Android 8.0; Pixel 2 Build/OPD3.170816.012) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/75.0.3765.0 Mobile Safari/537.36",
        411,
        731,
        2.625,
        False,
        True,
        True,
    ),
    Info(
        "Pixel 2 landscape",
        "Mozilla/5.0 (Linux; Android 8.0; Pixel 2 Build/OPD3.170816.012) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/75.0.3765.0 Mobile Safari/537.36",
        731,
        411,
        2.625,
        True,
        True,
        True,
    ),
    Info(
        "Pixel 2 XL",
        "Mozilla/5.0 (Linux; Android 8.0.0; Pixel 2 XL Build/OPD1.170816.004) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/75.0.3765.0 Mobile Safari/537.36",
        411,
        823,
        3.5,
        False,
        True,
        True,
    ),
    Info(
        "Pixel 2 XL landscape",
        "Mozilla/5.0 (Linux; Android 8.0.0; Pixel 2 XL Build/OPD1.170816.004) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/75.0.3765.0 Mobile Safari/537.36",
        823,
        411,
        3.5,
        True,
        True,
        True,
    ),
)
