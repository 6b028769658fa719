"""
Unit tests for CapabilityMap probing
"""

from webcompat.runtime import Capability, CapabilityMap, probe_capabilities


class PartialEngine:
    def reload(self):
        pass

    def loadRequest_(self, request):
        pass


SELECTORS = ("reload", "loadRequest:", "stopLoading")


class TestCapabilityMap:

    def test_probe_splits_available_and_missing(self):
        caps = CapabilityMap.probe(PartialEngine(), SELECTORS)

        assert caps.target_name == "PartialEngine"
        assert caps.get_available_capabilities() == {"reload", "loadRequest:"}
        assert caps.get_unavailable_capabilities() == {"stopLoading"}

    def test_capability_records(self):
        caps = probe_capabilities(PartialEngine(), SELECTORS, "LegacyView")

        cap = caps.get_capability("loadRequest:")
        assert isinstance(cap, Capability)
        assert cap.available
        assert "LegacyView.loadRequest_" in cap.notes
        assert "stopLoading" in caps.get_capability("stopLoading").notes

    def test_unknown_capability(self):
        caps = CapabilityMap.probe(PartialEngine(), SELECTORS)
        assert not caps.is_available("setDelegate:")
        assert caps.get_capability("setDelegate:").notes == "Unknown capability"

    def test_unavailable_map(self):
        caps = CapabilityMap.unavailable("UIWebView", SELECTORS)

        assert caps.get_available_capabilities() == set()
        assert caps.get_unavailable_capabilities() == set(SELECTORS)
        assert caps.get_capability("reload").notes == "Type not found at runtime"

    def test_as_dict(self):
        report = CapabilityMap.probe(PartialEngine(), SELECTORS, "LegacyView").as_dict()

        assert report["target"] == "LegacyView"
        assert list(report["capabilities"]) == sorted(SELECTORS)
        assert report["capabilities"]["reload"]["available"] is True
        assert report["capabilities"]["stopLoading"]["available"] is False
