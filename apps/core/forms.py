from django import forms


class FeedbackForm(forms.Form):
    name = forms.CharField(max_length=100)
    contact = forms.CharField(max_length=150)
    message = forms.CharField(widget=forms.Textarea(attrs={'rows': 4}), max_length=2000)

    def __init__(self, *args, labels=None, **kwargs):
        super().__init__(*args, **kwargs)
        if labels:
            for name, key in (('name', 'contact_name'), ('contact', 'contact_contact'), ('message', 'contact_message')):
                self.fields[name].label = labels[key]
                self.fields[name].widget.attrs['placeholder'] = labels[key]
