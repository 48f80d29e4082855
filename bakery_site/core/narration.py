"""
Voice narration for menu items

A recorded clip wins over synthesized speech; with neither the item is silent.
The browser side of playback lives in static/js/narration.js.
"""

DEFAULT_SPEECH_RATE = 0.9


def plan_narration(voice_file, voice_description, file_url, rate=DEFAULT_SPEECH_RATE):
    """Decide how an item should be narrated

    A clip picked in the admin form but not saved yet is played by the
    browser before this plan is consulted.
    """
    if voice_file:
        return {'mode': 'clip', 'src': file_url(voice_file)}
    text = (voice_description or '').strip()
    if text:
        return {'mode': 'speech', 'text': text, 'rate': rate}
    return {'mode': 'silent'}


def item_narration(item, file_url, rate=DEFAULT_SPEECH_RATE):
    return plan_narration(item.get('voice_file'), item.get('voice_description'), file_url, rate=rate)


def has_voice(item):
    return bool(item.get('voice_file') or (item.get('voice_description') or '').strip())


def voice_badge(item):
    """Label for the admin table voice column"""
    if item.get('voice_file'):
        return 'MP3'
    if (item.get('voice_description') or '').strip():
        return 'Text'
    return 'None'
