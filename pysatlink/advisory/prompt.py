# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Operator advisory text.

The natural-language advice shown to the operator comes from an external AI
service. This module builds the prompt sent to that service and the fixed
fallback messages shown when it cannot answer; it never performs the call.
``offline_guidance`` gives a deterministic summary for consoles running
without the service.
"""

from typing import Optional

from ..core.config import DEFAULT_THRESHOLDS
from ..core.data_structures import Coordinates, LookAngle, SignalStatus

LANGUAGES = ('en', 'zh')

ADVISORY_FALLBACKS = {
    'en': {
        'missing_key': "Advisory API key not found. Please configure the environment.",
        'quota': "Quota exceeded. Please try again later.",
        'failure': "Unable to retrieve advice at this time.",
        'empty': "No advice generated.",
    },
    'zh': {
        'missing_key': "未找到 API 密钥。请配置环境变量。",
        'quota': "配额已耗尽。请稍后再试或检查 API 计划。",
        'failure': "暂时无法获取建议。",
        'empty': "无建议生成。",
    },
}

_PROMPT_EN = """You are a maritime satellite communications expert.

Current Ship Status:
- Position: {lat:.2f} lat, {lng:.2f} lng
- Heading: {heading} degrees
- Target Satellite: GEO at {sat_lng} longitude

Calculated Angles:
- True Azimuth to Sat: {azimuth:.1f} deg
- Elevation to Sat: {elevation:.1f} deg
- Relative Azimuth (to bow): {relative_azimuth:.1f} deg

Signal Status: {status}

Explain the current connectivity situation in 2-3 sentences.
Important Rule: When elevation is below {no_los:g} degrees, the transmission must be forcibly disabled to prevent off-axis interference with adjacent satellites.

Guidelines:
1. If elevation < {no_los:g} deg, explicitly state that transmission is disabled to prevent interference.
2. If status is BLOCKED, suggest a better heading to clear the obstruction.
3. Keep it operational and professional.
"""

_PROMPT_ZH = """你是一名海事卫星通信专家。

当前船舶状态：
- 位置：纬度 {lat:.2f}, 经度 {lng:.2f}
- 船艏向：{heading} 度
- 目标卫星：GEO 卫星，经度 {sat_lng}

计算角度：
- 卫星真方位：{azimuth:.1f} 度
- 卫星仰角：{elevation:.1f} 度
- 相对方位（相对于船头）：{relative_azimuth:.1f} 度

信号状态：{status}

请用2-3句话解释当前的连接情况。
重要规则：当仰角低于 {no_los:g} 度时，为了防止对临近轨位的其他卫星产生旁瓣干扰，通信系统必须强制停止发射（Mute/Block）。

建议指南：
1. 如果仰角 < {no_los:g} 度，必须明确指出是因为防止干扰其他卫星而不可用。
2. 如果状态是被遮挡 (BLOCKED)，建议一个更好的航向来避开遮挡物。
3. 保持专业、简洁的操作建议。
"""

_GUIDANCE = {
    'en': {
        SignalStatus.NO_LOS: ("Satellite elevation is {elevation:.1f} deg, below the {no_los:g} deg limit. "
                              "Transmission is disabled to prevent interference with adjacent satellites."),
        SignalStatus.BLOCKED: ("The satellite at relative bearing {relative_azimuth:.1f} deg is obstructed "
                               "by ship structure."),
        SignalStatus.MARGINAL: ("Link available at low elevation ({elevation:.1f} deg); expect reduced "
                                "margin in heavy weather."),
        SignalStatus.OPTIMAL: "Clear line of sight at {elevation:.1f} deg elevation, azimuth {azimuth:.1f} deg.",
        'turn': " Steer to heading {heading:.0f} deg to clear the obstruction.",
    },
    'zh': {
        SignalStatus.NO_LOS: "卫星仰角 {elevation:.1f} 度，低于 {no_los:g} 度限制。为防止干扰临近卫星，已强制停止发射。",
        SignalStatus.BLOCKED: "相对方位 {relative_azimuth:.1f} 度的卫星被船体结构遮挡。",
        SignalStatus.MARGINAL: "链路可用但仰角较低（{elevation:.1f} 度），恶劣天气下余量不足。",
        SignalStatus.OPTIMAL: "视线良好，仰角 {elevation:.1f} 度，方位 {azimuth:.1f} 度。",
        'turn': " 建议调整航向至 {heading:.0f} 度以避开遮挡。",
    },
}


def _plain_number(value):
    """Shortest round-trip text for a number, integers without a trailing .0"""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _check_language(lang):
    if lang not in LANGUAGES:
        raise ValueError(f"Unsupported language '{lang}', expected one of {LANGUAGES}")


def build_advisory_prompt(ship_pos, heading: float, sat_lng: float,
                          look_angle: LookAngle, status: SignalStatus,
                          lang: str = 'en', no_los_elevation: Optional[float] = None) -> str:
    """
    Build the prompt for the external advisory service.

    Parameters
    ----------
    ship_pos : Coordinates or tuple
        Ship position in degrees
    heading : float
        Ship heading in degrees true
    sat_lng : float
        Satellite longitude in degrees
    look_angle : LookAngle
        Current pointing solution
    status : SignalStatus
        Current link state
    lang : str, optional
        'en' or 'zh' (default: 'en')
    no_los_elevation : float, optional
        Transmit-inhibit threshold quoted in the prompt, defaults to the
        classifier's

    Returns
    -------
    str
    """
    _check_language(lang)
    pos = Coordinates.from_value(ship_pos)
    if no_los_elevation is None:
        no_los_elevation = DEFAULT_THRESHOLDS.no_los_elevation
    template = _PROMPT_ZH if lang == 'zh' else _PROMPT_EN
    return template.format(
        lat=pos.lat, lng=pos.lng, heading=_plain_number(heading),
        sat_lng=_plain_number(sat_lng),
        azimuth=look_angle.azimuth, elevation=look_angle.elevation,
        relative_azimuth=look_angle.relative_azimuth,
        status=status.value, no_los=no_los_elevation,
    )


def offline_guidance(look_angle: LookAngle, status: SignalStatus, lang: str = 'en',
                     suggested_heading: Optional[float] = None,
                     no_los_elevation: Optional[float] = None) -> str:
    """Deterministic operator guidance for the current link state"""
    _check_language(lang)
    if no_los_elevation is None:
        no_los_elevation = DEFAULT_THRESHOLDS.no_los_elevation
    messages = _GUIDANCE[lang]
    text = messages[status].format(
        azimuth=look_angle.azimuth, elevation=look_angle.elevation,
        relative_azimuth=look_angle.relative_azimuth, no_los=no_los_elevation)
    if status is SignalStatus.BLOCKED and suggested_heading is not None:
        text += messages['turn'].format(heading=suggested_heading)
    return text


def fallback_message(kind: str, lang: str = 'en') -> str:
    """Fixed message for an unavailable advisory service

    ``kind`` is one of 'missing_key', 'quota', 'failure', 'empty'.
    """
    _check_language(lang)
    try:
        return ADVISORY_FALLBACKS[lang][kind]
    except KeyError:
        raise ValueError(f"Unknown fallback kind '{kind}'") from None
