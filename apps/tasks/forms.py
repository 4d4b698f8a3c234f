from django import forms

from .models import EDITABLE_FIELDS, Task


class TaskForm(forms.ModelForm):
    """
    Binds the task_form POST body to a Task.
    The hidden id decides nothing here; insert vs update is left to the service.
    """
    id = forms.IntegerField(required=False, widget=forms.HiddenInput)

    class Meta:
        model = Task
        fields = EDITABLE_FIELDS

    def bound_task(self) -> Task:
        """
        The Task built from the submitted fields, carrying the submitted id.
        Also usable after is_valid() fails, so a rejected edit keeps its id.
        """
        task = self.instance
        task.pk = self.cleaned_data.get('id')
        return task

    def to_task(self) -> Task:
        """Build an unsaved Task carrying the submitted id, if any."""
        self.save(commit=False)
        return self.bound_task()
