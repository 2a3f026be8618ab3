"""fakestore: storage backends for an in-process object-storage emulator."""
