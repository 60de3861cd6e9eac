import random

from selenium.webdriver.chrome.options import Options
from selenium_stealth import stealth

from emulated_devices.devices import DEVICES, Device


def mobile_emulation(device):
    info = device.device()
    return {
        "deviceMetrics": {
            "width": info.width,
            "height": info.height,
            "pixelRatio": info.scale
        },
        "userAgent": info.user_agent
    }


def random_device() -> Device:
    return random.choice([d for d in Device if d is not Device.Reset])


def lookup(name) -> Device:
    for d in Device:
        if DEVICES[d].name == name and d is not Device.Reset:
            return d
    raise KeyError(name)


def _platform(user_agent):
    if "iPhone" in user_agent or "iPad" in user_agent:
        return "iOS"
    if "Android" in user_agent:
        return "Android"
    return "Windows"


def chrome_options(device, options=None) -> Options:
    """Chrome options emulating ``device``. Device.Reset leaves them untouched."""
    if options is None:
        options = Options()

    info = device.device()
    if not info.user_agent:
        return options

    options.add_experimental_option("mobileEmulation", mobile_emulation(info))
    options.add_argument(f"user-agent={info.user_agent}")

    platform = _platform(info.user_agent)
    options.add_argument(f"--sec-ch-ua-platform='{platform}'")
    if platform == "iOS":
        options.add_argument("--sec-ch-ua-mobile='?1'")
        options.add_argument("--sec-ch-ua-full-version='14.0'")
    elif platform == "Android":
        options.add_argument("--sec-ch-ua-mobile='?1'")
        if "Chrome/" in info.user_agent:
            version = info.user_agent.split("Chrome/")[1].split(" ")[0]
            options.add_argument(f"--sec-ch-ua-full-version='{version}'")
    else:
        options.add_argument("--sec-ch-ua-mobile='?0'")

    return options


def stealth_profile(device):
    platform = _platform(device.device().user_agent)
    if platform == "iOS":
        return {"platform": "iPhone", "webgl_vendor": "Apple Inc.", "renderer": "Apple A10 GPU"}
    if platform == "Android":
        return {"platform": "Linux armv8l", "webgl_vendor": "Qualcomm", "renderer": "Adreno (TM) 630"}
    return {"platform": "Win32", "webgl_vendor": "Intel Inc.", "renderer": "Intel Iris OpenGL Engine"}


def apply_stealth(driver, device):
    profile = stealth_profile(device)
    stealth(driver,
            languages=["en-US", "en"],
            vendor="Google Inc.",
            platform=profile["platform"],
            webgl_vendor=profile["webgl_vendor"],
            renderer=profile["renderer"],
            fix_hairline=True)
