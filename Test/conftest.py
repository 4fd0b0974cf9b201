# 12.10.26

import pytest


SAMPLE_MANIFEST = """#EXTM3U
#EXT-X-VERSION:6

# AUDIO
#EXT-X-MEDIA:TYPE=AUDIO,GROUP-ID="audio/mp4a.40.2",CHANNELS="2",NAME="English - Stereo",LANGUAGE="en",AUTOSELECT=YES,DEFAULT=NO,URI="media.2.m3u8"
#EXT-X-MEDIA:TYPE=AUDIO,GROUP-ID="audio/ac-3",CHANNELS="6",NAME="English - 5.1 Channel",LANGUAGE="en",AUTOSELECT=YES,DEFAULT=NO,URI="media.3.m3u8"

# SUBTITLES
#EXT-X-MEDIA:TYPE=SUBTITLES,GROUP-ID="subs",NAME="German",LANGUAGE="de",AUTOSELECT=YES,DEFAULT=NO,URI="media.13.m3u8"
#EXT-X-MEDIA:TYPE=SUBTITLES,GROUP-ID="subs",NAME="English",LANGUAGE="en",AUTOSELECT=YES,DEFAULT=NO,URI="media.5.m3u8"
#EXT-X-MEDIA:TYPE=SUBTITLES,GROUP-ID="subs",NAME="English (forced)",LANGUAGE="en",FORCED=YES,AUTOSELECT=YES,DEFAULT=NO,URI="media.4.m3u8"
#EXT-X-MEDIA:TYPE=SUBTITLES,GROUP-ID="subs",NAME="English (SDH)",LANGUAGE="en",CHARACTERISTICS="public.accessibility.describes-music-and-sound",AUTOSELECT=YES,DEFAULT=NO,URI="media.6.m3u8"
#EXT-X-MEDIA:TYPE=SUBTITLES,GROUP-ID="subs",NAME="Español",LANGUAGE="es",AUTOSELECT=YES,DEFAULT=NO,URI="media.15.m3u8"

# VIDEO
#EXT-X-STREAM-INF:AUDIO="audio/mp4a.40.2",BANDWIDTH=376205,SUBTITLES="subs",CODECS="avc1.640020,mp4a.40.2",RESOLUTION=1356x678,FRAME-RATE=23.976
media.1.m3u8
"""


@pytest.fixture
def sample_manifest():
    return SAMPLE_MANIFEST
