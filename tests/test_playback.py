import pytest

from mangamotion.animation.playback import Playback


def test_advance_wraps_around():
    pb = Playback(frame_count=3)
    pb.play()
    assert [pb.advance() for _ in range(4)] == [1, 2, 0, 1]


def test_stopped_playback_holds_frame():
    pb = Playback(frame_count=4)
    pb.play()
    pb.advance()
    pb.stop()
    assert pb.advance() == 1


def test_frame_at_uses_interval():
    pb = Playback(frame_count=8, interval_ms=100)
    assert pb.frame_at(0) == 0
    assert pb.frame_at(250) == 2
    assert pb.frame_at(850) == 0
    assert pb.loop_duration_ms == 800


def test_empty_playback_never_plays():
    pb = Playback(frame_count=0)
    pb.play()
    assert not pb.playing
    assert pb.frame_at(1000) == 0


def test_invalid_interval():
    with pytest.raises(ValueError):
        Playback(frame_count=2, interval_ms=0)


def test_offset_ms_matches_frame_at():
    pb = Playback(frame_count=5, interval_ms=120)
    assert [pb.offset_ms(i) for i in range(5)] == [0, 120, 240, 360, 480]
    assert all(pb.frame_at(pb.offset_ms(i)) == i for i in range(5))
