from maproster.config.settings import CameraSettings
from maproster.domain.models import Point, UserPosition
from maproster.roster.camera import MapCameraController

HERE = UserPosition(lat=-23.55, lng=-46.63)
SPOT = Point(id=1, name="Ponto A", lat=-23.549, lng=-46.629)


def test_recenter_uses_wide_span():
    cam = MapCameraController(mounted=True)
    cam.recenter(HERE)
    intent = cam.current
    assert intent.kind == "recenter"
    assert (intent.lat, intent.lng) == (HERE.lat, HERE.lng)
    assert intent.lat_delta == intent.lng_delta == 0.02


def test_zoom_to_uses_tight_span():
    cam = MapCameraController(mounted=True)
    cam.zoom_to(SPOT)
    assert cam.current.kind == "zoom_to"
    assert (cam.current.lat, cam.current.lng) == (SPOT.lat, SPOT.lng)
    assert cam.current.lat_delta == 0.01


def test_frame_new_point_span_follows_settings():
    cam = MapCameraController(CameraSettings(new_point_span_deg=0.02), mounted=True)
    cam.frame_new_point(SPOT)
    assert cam.current.kind == "frame_new_point"
    assert cam.current.lat_delta == 0.02


def test_intents_wait_for_mount_and_latest_wins():
    cam = MapCameraController()
    seen = []
    cam.subscribe(seen.append)

    cam.recenter(HERE)
    cam.zoom_to(SPOT)
    assert cam.current is None
    assert cam.pending.kind == "zoom_to"
    assert seen == []

    cam.mount()
    assert cam.pending is None
    assert [i.kind for i in seen] == ["zoom_to"]


def test_recenter_without_position_is_deferred_until_position_arrives():
    cam = MapCameraController(mounted=True)
    cam.recenter(None)
    assert cam.current is None
    assert cam.awaiting_position

    cam.update_position(HERE)
    assert cam.current.kind == "recenter"
    assert not cam.awaiting_position


def test_update_position_without_deferred_recenter_issues_nothing():
    cam = MapCameraController(mounted=True)
    cam.update_position(HERE)
    assert cam.current is None


def test_consume_returns_each_intent_once():
    cam = MapCameraController(mounted=True)
    assert cam.consume() is None
    cam.zoom_to(SPOT)
    assert cam.consume().kind == "zoom_to"
    assert cam.consume() is None
    assert cam.current.kind == "zoom_to"


def test_unsubscribe_stops_notifications():
    cam = MapCameraController(mounted=True)
    seen = []
    unsubscribe = cam.subscribe(seen.append)
    cam.zoom_to(SPOT)
    unsubscribe()
    cam.recenter(HERE)
    assert [i.kind for i in seen] == ["zoom_to"]


def test_unmount_holds_intents_again():
    cam = MapCameraController(mounted=True)
    cam.unmount()
    cam.zoom_to(SPOT)
    assert cam.current is None
    cam.mount()
    assert cam.current.kind == "zoom_to"
